import pytest

from baize.errors import (
    ErrCode,
    FileAlreadyExistsError,
    HemyError,
    NewFileError,
    NewFolderError,
    OpenFileError,
    OpenFolderError,
)


def test_codes_start_at_zero_and_are_sequential():
    codes = [ErrCode(value) for value in range(len(ErrCode))]
    assert codes == list(ErrCode)
    assert codes[0] is ErrCode.OK


def test_named_codes():
    assert ErrCode(0) is ErrCode.OK
    assert ErrCode(1) is ErrCode.FAILURE
    assert NewFileError("a").code < FileAlreadyExistsError("b").code
    assert FileAlreadyExistsError("b").code < ErrCode.CLOSE_FOLDER_FAILED


@pytest.mark.parametrize(
    "exc_type, code",
    [
        (NewFileError, ErrCode.NEW_FILE_FAILED),
        (FileAlreadyExistsError, ErrCode.NEW_FILE_EXIST),
        (NewFolderError, ErrCode.NEW_FOLDER_FAILED),
        (OpenFileError, ErrCode.OPEN_FILE_FAILED),
        (OpenFolderError, ErrCode.OPEN_FOLDER_FAILED),
    ],
)
def test_exception_codes(exc_type, code):
    with pytest.raises(HemyError) as info:
        raise exc_type("boom")
    assert info.value.code is code
    assert str(info.value) == "boom"
    assert info.value.message == "boom"


def test_base_error_default_code_is_failure():
    assert HemyError("x").code is ErrCode.FAILURE


def test_code_can_be_overridden():
    err = HemyError("x", code=ErrCode.SAVE_FILE_FAILED)
    assert err.code is ErrCode.SAVE_FILE_FAILED
    assert NewFileError("y").code is ErrCode.NEW_FILE_FAILED