"""
Version Up and Hip Browser tool tests

Only the Houdini-independent parts are covered here.
"""

import logging
import sys
import types

import pytest

from HipPipe.core.errors import HipFileNotFoundError, MalformedVersionError
from HipPipe.core.hip_file import HipFile
from HipPipe.houdini.tools import hip_browser, version_up


@pytest.fixture(autouse=True)
def default_extensions(monkeypatch):
    monkeypatch.delenv("HIPPIPE_HIP_EXTENSIONS", raising=False)


@pytest.fixture
def shot_dir(tmp_path):
    """Directory with a few versions of two scenes and some other files"""
    for name in [
        "shot01_001.hip",
        "shot01_002.hip",
        "shot01_010.hip",
        "shot01_003.hipnc",
        "fx_sim_004.hip",
        "fx_sim_002.hip",
        "notes.txt",
        "my_scene.hip",
        "a,b_001.hip",
    ]:
        (tmp_path / name).write_text("")
    (tmp_path / "backup_009.hip").mkdir()
    return tmp_path


class TestNextVersionPath:

    def test_next_version(self, tmp_path):
        current = tmp_path / "shot01_004.hip"
        assert version_up.next_version_path(current) == str(tmp_path / "shot01_005.hip")

    def test_skips_existing_versions(self, tmp_path):
        (tmp_path / "shot01_005.hip").write_text("")
        (tmp_path / "shot01_006.hip").write_text("")
        current = tmp_path / "shot01_004.hip"

        assert version_up.next_version_path(current) == str(tmp_path / "shot01_007.hip")

    def test_overwrite_when_not_skipping(self, tmp_path):
        (tmp_path / "shot01_005.hip").write_text("")
        current = tmp_path / "shot01_004.hip"

        result = version_up.next_version_path(current, skip_existing=False)
        assert result == str(tmp_path / "shot01_005.hip")

    def test_unversioned_scene(self, tmp_path):
        assert version_up.next_version_path(tmp_path / "lookdev.hipnc") == str(tmp_path / "lookdev_002.hipnc")

    def test_not_a_project_file(self, tmp_path):
        with pytest.raises(HipFileNotFoundError):
            version_up.next_version_path(tmp_path / "shot01_004.nk")

    def test_malformed_version(self, tmp_path):
        with pytest.raises(MalformedVersionError):
            version_up.next_version_path(tmp_path / "shot01_final.hip")

    def test_register(self):
        info = version_up.register()
        assert info['menu_name'] == 'Version Up'
        assert info['action'] is version_up.version_up_current_hip


class FakeHipFileApi:
    """Stand-in for hou.hipFile"""

    def __init__(self, path, new_file=False):
        self._path = path
        self._new_file = new_file
        self.saved = []

    def path(self):
        return self._path

    def isNewFile(self):
        return self._new_file

    def save(self, file_name=None):
        self.saved.append(file_name)


@pytest.fixture
def fake_hou(monkeypatch):
    """Install a minimal hou module, returns a factory taking the scene path"""
    messages = []

    def install(path, new_file=False):
        hou = types.SimpleNamespace(
            hipFile=FakeHipFileApi(str(path), new_file),
            ui=types.SimpleNamespace(displayMessage=lambda text, **kwargs: messages.append(text)),
            severityType=types.SimpleNamespace(Error="error", Warning="warning"),
            messages=messages,
        )
        monkeypatch.setitem(sys.modules, "hou", hou)
        return hou

    return install


class TestVersionUpCurrentHip:

    def test_saves_next_version(self, tmp_path, fake_hou):
        hou = fake_hou(tmp_path / "shot01_004.hip")

        new_path = version_up.version_up_current_hip()

        assert new_path == str(tmp_path / "shot01_005.hip")
        assert hou.hipFile.saved == [new_path]

    def test_unsaved_scene_is_refused(self, tmp_path, fake_hou):
        hou = fake_hou(tmp_path / "untitled.hip", new_file=True)

        assert version_up.version_up_current_hip() is None
        assert hou.hipFile.saved == []
        assert "Save this scene" in hou.messages[0]

    def test_invalid_name_shows_error(self, tmp_path, fake_hou):
        hou = fake_hou(tmp_path / "shot01_final.hip")

        assert version_up.version_up_current_hip() is None
        assert hou.hipFile.saved == []
        assert "Cannot version up" in hou.messages[0]


class TestListHipFiles:

    def test_lists_project_files_sorted_by_name(self, shot_dir):
        hips = hip_browser.list_hip_files(shot_dir)

        assert [h.get_full_name() for h in hips] == [
            "fx_sim_002.hip",
            "fx_sim_004.hip",
            "shot01_001.hip",
            "shot01_002.hip",
            "shot01_003.hipnc",
            "shot01_010.hip",
        ]

    def test_empty_directory_warns(self, tmp_path, caplog):
        hip_logger = logging.getLogger("HipPipe")
        hip_logger.propagate = True
        try:
            with caplog.at_level(logging.WARNING, logger="HipPipe"):
                assert hip_browser.list_hip_files(tmp_path) == []
        finally:
            hip_logger.propagate = False

        assert "No Houdini projects found" in caplog.text

    def test_register(self):
        info = hip_browser.register()
        assert info['menu_name'] == 'Hip Browser'
        assert info['action'] is hip_browser.show_hip_browser_widget


class TestLatestVersions:

    def test_keeps_highest_version_per_base_and_extension(self, shot_dir):
        latest = hip_browser.latest_versions(hip_browser.list_hip_files(shot_dir))

        assert [h.get_full_name() for h in latest] == [
            "fx_sim_004.hip",
            "shot01_010.hip",
            "shot01_003.hipnc",
        ]

    def test_empty(self):
        assert hip_browser.latest_versions([]) == []

    def test_first_seen_order(self):
        hips = [HipFile("b", "hip", 1), HipFile("a", "hip", 3), HipFile("b", "hip", 2)]
        assert hip_browser.latest_versions(hips) == [HipFile("b", "hip", 2), HipFile("a", "hip", 3)]
