from vnreg.executor import RenderBlock, apply_command, execute_script
from vnreg.parser import (
    Choice,
    Dialogue,
    Figure,
    Jump,
    Label,
    PlayBgm,
    PlayVoice,
    SetBackground,
    parse_script,
)
from vnreg.script import Script


def test_block_combines_commands():
    script = Script.from_commands(
        [(SetBackground("a.png"), PlayBgm("b.ogg"), PlayVoice("v.ogg"), Dialogue("Alice", "Hi"))]
    )
    block = execute_script(script)
    assert block == RenderBlock(
        dialogue=("Alice", "Hi"), background="a.png", bgm="b.ogg", voice="v.ogg"
    )
    assert execute_script(script) is None


def test_empty_blocks_are_skipped():
    script = Script.from_commands([(), (), (SetBackground("a.png"),)])
    block = execute_script(script)
    assert block.background == "a.png"
    assert len(script) == 0


def test_only_empty_blocks_give_none():
    assert execute_script(Script.from_commands([(), ()])) is None


def test_figure_is_recorded_as_tuple():
    block = RenderBlock()
    apply_command(Figure("alice", "near", "b1", "f2", "0"), block)
    assert block.figure == ("alice", "near", "b1", "f2", "0")


def test_later_command_overrides_earlier():
    script = Script.from_commands([(SetBackground("a.png"), SetBackground("c.png"))])
    assert execute_script(script).background == "c.png"


def test_flow_commands_change_nothing():
    script = Script.from_commands(
        [(Jump("end"),), (Label("start"),), (Choice((("yes", "a"), ("no", "b"))),)]
    )
    for _ in range(3):
        assert execute_script(script) == RenderBlock()
    assert execute_script(script) is None


def test_runs_parsed_script():
    script = parse_script("%version 1\n\n@bg a.png\n\nAlice \u201cHi\u201d\n")
    first = execute_script(script)
    second = execute_script(script)
    assert first == RenderBlock(background="a.png")
    assert second == RenderBlock(dialogue=("Alice", "Hi"))
    assert execute_script(script) is None