import pytest


class FakeProcess:
    """Stands in for the cargo child process."""

    returncode = 0
    calls = []

    def __init__(self, cmd):
        self.cmd = cmd
        self.pid = 4242
        FakeProcess.calls.append(cmd)

    def wait(self):
        return FakeProcess.returncode


@pytest.fixture
def fake_cargo(monkeypatch):
    """Replace subprocess.Popen in the builder with a recording fake."""
    FakeProcess.returncode = 0
    FakeProcess.calls = []
    monkeypatch.delenv("CARGO", raising=False)
    monkeypatch.setattr("plugin_build.builder.subprocess.Popen", FakeProcess)
    return FakeProcess


@pytest.fixture
def plugin_dir(tmp_path, monkeypatch):
    """Working directory laid out like a plugin package with an assets folder."""
    assets = tmp_path / "assets"
    (assets / "icons").mkdir(parents=True)
    (assets / "icon.png").write_bytes(b"\x89PNG")
    (assets / "manifest.json").write_text('{"Name": "Starter Pack"}')
    (assets / "icons" / "action.png").write_bytes(b"\x89PNG")
    monkeypatch.chdir(tmp_path)
    return tmp_path
