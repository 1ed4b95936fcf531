from pretty_tree import Group, Sep, to_string
from pretty_tree.log import configure_logging, disable_logging


def test_logging_disabled_by_default(capsys):
    to_string(Group("a" + Sep(1) + "b"), 80, 2)
    assert "rendering root" not in capsys.readouterr().err


def test_configure_logging_reports_root_decision(capsys):
    handler_id = configure_logging("DEBUG")
    try:
        to_string(Group("a" + Sep(1) + "b"), 2, 2)
    finally:
        disable_logging(handler_id)
    err = capsys.readouterr().err
    assert "rendering root" in err
    assert "broken=True" in err
