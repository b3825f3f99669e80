from vnreg.script import Script


def test_blocks_come_out_in_order():
    script = Script.from_commands([("a",), ("b", "c"), ()])
    assert script.next_command() == ("a",)
    assert script.next_command() == ("b", "c")
    assert script.next_command() == ()
    assert script.next_command() is None


def test_len_shrinks_as_blocks_are_taken():
    script = Script.from_commands([("a",), ("b",)])
    assert len(script) == 2
    script.next_command()
    assert len(script) == 1


def test_empty_script_stays_exhausted():
    script = Script.from_commands([])
    assert script.next_command() is None
    assert script.next_command() is None
    assert len(script) == 0


def test_from_commands_accepts_generator():
    script = Script.from_commands((x,) for x in "xy")
    assert script.next_command() == ("x",)
    assert script.next_command() == ("y",)