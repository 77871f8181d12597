import pytest

from fdfview.errors import ExitStatus, FdfError, check_filename, message_for


def test_message_for_known_statuses():
    assert message_for(ExitStatus.FILE_OPEN_ERROR) == "FILE_OPEN_ERROR: Failed to open file"
    assert message_for(ExitStatus.SUCCESS) == "SUCCESS: The program ran successfully"
    assert message_for(ExitStatus.INVALID_FILENAME_ERROR) == (
        "INVALID_FILENAME_ERROR: The filename must end with .fdf"
    )


def test_message_for_invalid_map_and_unknown():
    assert message_for(ExitStatus.INVALID_MAP_ERROR) == "That's not a valid map!"
    assert message_for(999) == "That's not a valid map!"


def test_message_starts_with_status_name():
    for status in ExitStatus:
        if status is ExitStatus.INVALID_MAP_ERROR:
            continue
        assert message_for(status).startswith(status.name + ":")


def test_fdf_error_carries_status_and_message():
    err = FdfError(ExitStatus.MAP_EMPTY_ERROR)
    assert err.status == ExitStatus.MAP_EMPTY_ERROR
    assert str(err) == message_for(ExitStatus.MAP_EMPTY_ERROR)
    assert err.message == str(err)


@pytest.mark.parametrize("name", ["42.fdf", "maps/t1.fdf", ".fdf"])
def test_check_filename_accepts(name):
    assert check_filename(name) == name


@pytest.mark.parametrize("name", ["map.txt", "fdf", "map.fdf.bak", "", "map.FDF"])
def test_check_filename_rejects(name):
    with pytest.raises(FdfError) as info:
        check_filename(name)
    assert info.value.status == ExitStatus.INVALID_FILENAME_ERROR