import pytest

from framekit.results import Errno, SyscallError, code_from_result, result_from_code


def test_non_negative_codes_are_results():
    assert result_from_code(0) == 0
    assert result_from_code(42) == 42


def test_negative_code_raises_matching_errno():
    with pytest.raises(SyscallError) as info:
        result_from_code(-2)
    assert info.value.errno is Errno.ENOENT


def test_unknown_negative_code_is_unknown_error():
    with pytest.raises(SyscallError) as info:
        result_from_code(-100)
    assert info.value.errno is Errno.EUNKN


def test_errno_values_match_codes():
    assert Errno(-3) is Errno.ENOHANDLES
    assert Errno.EBADSTR == -11
    assert Errno.EINVAL == -8


@pytest.mark.parametrize("errno", list(Errno))
def test_error_round_trip(errno):
    with pytest.raises(SyscallError) as info:
        result_from_code(int(errno))
    assert info.value.errno is errno
    assert code_from_result(info.value) == int(errno)


def test_code_from_errno_and_value():
    assert code_from_result(Errno.EINVAL) == -8
    assert code_from_result(7) == 7


def test_code_from_negative_value_rejected():
    with pytest.raises(ValueError):
        code_from_result(-1)


def test_errno_rejects_non_integer():
    with pytest.raises(ValueError):
        Errno("ENOENT")