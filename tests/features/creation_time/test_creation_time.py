import re
import subprocess
import pytest

from weblocscan.features.creation_time.domain.models import TimestampSource, UNKNOWN_CREATION_DATE
from weblocscan.features.creation_time.data import stat_adapter
from weblocscan.features.creation_time.data.stat_adapter import StatCommandBirthTime, NullBirthTime
from weblocscan.features.creation_time.service import resolver as resolver_module
from weblocscan.features.creation_time.service.resolver import CreationTimeResolver, select_birth_time_source

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.webloc"
    path.write_text("x")
    return path


def fake_completed(stdout: bytes, returncode: int = 0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=b"")


# --- CreationTimeResolver ---

def test_resolver_prefers_birth_time(sample_file, fixed_birth_time):
    resolver = CreationTimeResolver(primary=fixed_birth_time)

    result = resolver.lookup(sample_file)

    assert result.text == "2021-03-04 05:06:07"
    assert result.source == TimestampSource.BIRTH_TIME
    assert fixed_birth_time.calls == [sample_file]


def test_resolver_falls_back_to_metadata_change_time(sample_file, no_birth_time):
    resolver = CreationTimeResolver(primary=no_birth_time)

    result = resolver.lookup(sample_file)

    assert DATE_PATTERN.match(result.text)
    assert result.source == TimestampSource.METADATA_CHANGE


def test_resolver_falls_back_when_birth_time_cannot_be_formatted(sample_file):
    class AbsurdBirthTime(NullBirthTime):
        def birth_timestamp(self, path):
            return 1e20

    result = CreationTimeResolver(primary=AbsurdBirthTime()).lookup(sample_file)

    assert result.source == TimestampSource.METADATA_CHANGE
    assert DATE_PATTERN.match(result.text)


def test_resolver_returns_unknown_for_vanished_file(tmp_path, no_birth_time):
    resolver = CreationTimeResolver(primary=no_birth_time)

    result = resolver.lookup(tmp_path / "gone.webloc")

    assert result.text == UNKNOWN_CREATION_DATE
    assert result.source == TimestampSource.UNAVAILABLE


def test_resolve_returns_plain_text(sample_file, fixed_birth_time, no_birth_time):
    for source in (fixed_birth_time, no_birth_time):
        assert DATE_PATTERN.match(CreationTimeResolver(primary=source).resolve(sample_file))


# --- StatCommandBirthTime ---

def test_stat_command_parses_numeric_output(monkeypatch, sample_file):
    captured = {}

    def fake_run(cmd, **kwargs):
        captured["cmd"] = cmd
        captured["timeout"] = kwargs.get("timeout")
        return fake_completed(b"1614834367\n")

    monkeypatch.setattr(stat_adapter.subprocess, "run", fake_run)

    source = StatCommandBirthTime(binary="/usr/bin/stat", timeout=5)

    assert source.birth_timestamp(sample_file) == 1614834367.0
    assert captured["cmd"] == ["/usr/bin/stat", "-f", "%B", str(sample_file)]
    assert captured["timeout"] == 5


@pytest.mark.parametrize("stdout", [b"", b"   \n", b"not-a-number", b"nan", b"inf", b"0\n", b"-5"])
def test_stat_command_rejects_unusable_output(monkeypatch, sample_file, stdout):
    monkeypatch.setattr(stat_adapter.subprocess, "run", lambda cmd, **kw: fake_completed(stdout))
    assert StatCommandBirthTime(binary="stat").birth_timestamp(sample_file) is None


def test_zero_birth_time_uses_metadata_change_fallback(monkeypatch, sample_file):
    # stat prints 0 when the filesystem has no birth time for the file
    monkeypatch.setattr(stat_adapter.subprocess, "run", lambda cmd, **kw: fake_completed(b"0\n"))

    result = CreationTimeResolver(primary=StatCommandBirthTime(binary="stat")).lookup(sample_file)

    assert result.source == TimestampSource.METADATA_CHANGE
    assert not result.text.startswith("1970-01-01")


def test_stat_command_ignores_output_on_failure(monkeypatch, sample_file):
    monkeypatch.setattr(stat_adapter.subprocess, "run", lambda cmd, **kw: fake_completed(b"123", returncode=1))
    assert StatCommandBirthTime(binary="stat").birth_timestamp(sample_file) is None


def test_stat_command_missing_binary(monkeypatch, sample_file):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(stat_adapter.subprocess, "run", fake_run)
    assert StatCommandBirthTime(binary="no-such-stat").birth_timestamp(sample_file) is None


def test_stat_command_timeout(monkeypatch, sample_file):
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

    monkeypatch.setattr(stat_adapter.subprocess, "run", fake_run)
    assert StatCommandBirthTime(binary="stat", timeout=0.1).birth_timestamp(sample_file) is None


def test_null_birth_time_never_answers(sample_file):
    assert NullBirthTime().birth_timestamp(sample_file) is None


# --- Capability detection ---

def test_select_source_on_linux_skips_stat():
    # GNU stat's -f means filesystem status; it must never be used for birth time
    assert isinstance(select_birth_time_source("linux"), NullBirthTime)


def test_select_source_on_windows():
    assert isinstance(select_birth_time_source("win32"), NullBirthTime)


def test_select_source_on_macos_with_stat(monkeypatch):
    monkeypatch.setattr(resolver_module.shutil, "which", lambda name: "/usr/bin/stat")
    assert isinstance(select_birth_time_source("darwin"), StatCommandBirthTime)


def test_select_source_on_macos_without_stat(monkeypatch):
    monkeypatch.setattr(resolver_module.shutil, "which", lambda name: None)
    assert isinstance(select_birth_time_source("darwin"), NullBirthTime)
