import importlib.util
import sys
from pathlib import Path

from src.mediawidget.domain.models import DeletionOutcome
from tests.mocks.http import DummyHTTPResponse, DummyTransport


PROJECT_ROOT = Path(__file__).resolve().parents[3]
MODULE_PATH = PROJECT_ROOT / "scripts" / "delete_by_token.py"
SPEC = importlib.util.spec_from_file_location("delete_by_token_module", MODULE_PATH)
delete_by_token = importlib.util.module_from_spec(SPEC)
assert SPEC and SPEC.loader
sys.modules["delete_by_token_module"] = delete_by_token
SPEC.loader.exec_module(delete_by_token)


def _configure(monkeypatch, cloud_name="demo-cloud"):
    monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", cloud_name)
    monkeypatch.setattr(delete_by_token, "configure_logging", lambda: None)


def test_perform_delete_success(monkeypatch, http: DummyTransport):
    _configure(monkeypatch)
    http.responses.append(DummyHTTPResponse(200))

    summary = delete_by_token.perform_delete("tok1", public_id="uploads/a")

    assert summary.outcome is DeletionOutcome.DELETED
    assert http.requests[0].url.endswith("/v1_1/demo-cloud/delete_by_token")


def test_main_returns_one_on_status_error(monkeypatch, http: DummyTransport, capsys):
    _configure(monkeypatch)
    http.responses.append(DummyHTTPResponse(404))

    exit_code = delete_by_token.main(["tok1"])

    assert exit_code == 1
    assert "status 404" in capsys.readouterr().err


def test_main_returns_two_without_cloud_name(monkeypatch, http: DummyTransport, capsys):
    _configure(monkeypatch, cloud_name="")

    exit_code = delete_by_token.main(["tok1"])

    assert exit_code == 2
    assert http.requests == []
    assert "not configured" in capsys.readouterr().err


def test_main_prints_summary(monkeypatch, http: DummyTransport, capsys):
    _configure(monkeypatch)
    http.responses.append(DummyHTTPResponse(200))

    assert delete_by_token.main(["tok1", "--public-id", "uploads/a"]) == 0
    assert "public_id=uploads/a" in capsys.readouterr().out
