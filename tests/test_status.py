import pytest

from cgkit.status import (
    BASIC_EXCEPTION,
    EMPTY,
    STATUS_ERR,
    STATUS_ERROR_INFO_CONNECTOR,
    STATUS_OK,
    CGraphException,
    CObject,
    DescInfo,
    FunctionType,
    Status,
)


def test_default_status_is_ok():
    status = Status()
    assert status.code == STATUS_OK
    assert status.info == EMPTY
    assert status.is_ok()
    assert status.is_not_err()
    assert not status.is_err()
    assert not status.is_not_ok()


def test_info_only_gives_error_code():
    status = Status("broken")
    assert status.code == STATUS_ERR
    assert status.info == "broken"
    assert status.is_err()
    assert status.is_not_ok()


def test_explicit_code_and_info():
    status = Status("warn", 7)
    assert status.code == 7
    assert status.info == "warn"


def test_positive_code_is_warning():
    status = Status("warn", 3)
    assert not status.is_ok()
    assert not status.is_err()
    assert status.is_not_err()
    assert status.is_not_ok()


def test_iadd_both_ok_stays_ok():
    status = Status()
    status += Status()
    assert status == Status()


def test_iadd_ok_with_error_takes_error_info():
    status = Status()
    status += Status("bad")
    assert status.code == STATUS_ERR
    assert status.info == "bad"


def test_iadd_error_with_ok_keeps_info():
    status = Status("first", -5)
    status += Status()
    assert status.code == STATUS_ERR
    assert status.info == "first"


def test_iadd_two_errors_joins_info():
    status = Status("a")
    status += Status("b")
    assert status.info == "a" + STATUS_ERROR_INFO_CONNECTOR + "b"
    assert status.code == STATUS_ERR


def test_iadd_warning_becomes_error():
    status = Status()
    status += Status("warn", 2)
    assert status.code == STATUS_ERR
    assert status.info == "warn"


def test_add_leaves_operands_untouched():
    left = Status("x")
    right = Status("y")
    combined = left + right
    assert left == Status("x")
    assert right == Status("y")
    assert combined.info == "x" + STATUS_ERROR_INFO_CONNECTOR + "y"


def test_set_status_and_reset():
    status = Status()
    status.set_status("oops")
    assert status.code == STATUS_ERR
    assert status.info == "oops"
    status.set_status("later", 4)
    assert status.code == 4
    status.reset()
    assert status == Status()


def test_exception_default_message():
    exc = CGraphException()
    assert exc.info == BASIC_EXCEPTION
    assert str(exc) == BASIC_EXCEPTION


def test_exception_custom_message():
    exc = CGraphException("input is null")
    assert exc.info == "input is null"
    assert str(exc) == "input is null"
    with pytest.raises(CGraphException, match="input is null"):
        raise exc


def test_function_type_values():
    assert [member.value for member in FunctionType] == [1, 2, 3]
    assert FunctionType(2) is FunctionType.RUN


def test_cobject_requires_run():
    with pytest.raises(TypeError):
        CObject()


def test_cobject_default_lifecycle():
    class Worker(CObject):
        def run(self):
            return Status("ran", 1)

    worker = Worker()
    assert CObject.init(worker) == Status()
    assert CObject.destroy(worker) == Status()
    ran = worker.run()
    assert ran.code == 1
    assert ran.info == "ran"


def test_desc_info_chaining():
    desc = DescInfo()
    assert desc.name == EMPTY
    result = desc.set_name("node").set_description("a node")
    assert result is desc
    assert desc.name == "node"
    assert desc.description == "a node"
    assert desc.session == EMPTY