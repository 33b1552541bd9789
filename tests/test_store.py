"""Tests for the JSON submission store."""

import json
import threading
from pathlib import Path

from apps.intake.models import Submission
from apps.intake.store import SubmissionStore, get_submission_store


class TestEnsureInitialized:
    """Tests for store initialization."""

    def test_creates_directory_and_empty_document(self, tmp_path: Path) -> None:
        """A missing file and parent directory are created."""
        store = SubmissionStore(tmp_path / "nested" / "data" / "submissions.json")
        store.ensure_initialized()
        assert json.loads(store.path.read_text()) == {"submissions": []}

    def test_is_idempotent(self, tmp_path: Path) -> None:
        """Existing content is left untouched."""
        store = SubmissionStore(tmp_path / "submissions.json")
        store.path.write_text(json.dumps({"submissions": [{"id": "1"}]}))
        store.ensure_initialized()
        store.ensure_initialized()
        assert json.loads(store.path.read_text()) == {"submissions": [{"id": "1"}]}


class TestAppendAndRead:
    """Tests for append and read_all."""

    def test_append_then_read_returns_last_record(self, tmp_path: Path) -> None:
        """The appended record is last and earlier records are unchanged."""
        store = SubmissionStore(tmp_path / "submissions.json")
        first = Submission.create(name="First").to_dict()
        second = Submission.create(name="Second", images=["/uploads/second/a-1.png"]).to_dict()

        store.append(first)
        store.append(second)

        data = store.read_all()
        assert data["submissions"] == [first, second]
        assert data["submissions"][-1] == second

    def test_read_without_append_round_trips(self, tmp_path: Path) -> None:
        """Reading back a written document yields the same structure."""
        store = SubmissionStore(tmp_path / "submissions.json")
        document = {"submissions": [{"id": "1", "name": "A", "images": []}], "note": "kept"}
        store.path.write_text(json.dumps(document))
        assert store.read_all() == document
        assert store.read_all() == document

    def test_read_corrupt_file_returns_empty(self, tmp_path: Path) -> None:
        """Unparsable content degrades to an empty store."""
        store = SubmissionStore(tmp_path / "submissions.json")
        store.path.write_text("{not json")
        assert store.read_all() == {"submissions": []}

    def test_read_empty_file_returns_empty(self, tmp_path: Path) -> None:
        """A zero-byte file counts as an empty store."""
        store = SubmissionStore(tmp_path / "submissions.json")
        store.path.write_text("")
        assert store.read_all() == {"submissions": []}

    def test_read_wrong_shape_returns_empty(self, tmp_path: Path) -> None:
        """A document without a submissions list counts as empty."""
        store = SubmissionStore(tmp_path / "submissions.json")
        store.path.write_text(json.dumps([1, 2, 3]))
        assert store.read_all() == {"submissions": []}

    def test_append_to_corrupt_file_starts_over(self, tmp_path: Path) -> None:
        """Appending to corrupt content replaces it with a fresh document."""
        store = SubmissionStore(tmp_path / "submissions.json")
        store.path.write_text("garbage")
        record = Submission.create(name="Jane").to_dict()

        store.append(record)

        assert json.loads(store.path.read_text()) == {"submissions": [record]}

    def test_no_temporary_files_left_behind(self, tmp_path: Path) -> None:
        """Writes replace the document in place."""
        store = SubmissionStore(tmp_path / "submissions.json")
        store.append(Submission.create(name="Jane").to_dict())
        assert [p.name for p in tmp_path.iterdir()] == ["submissions.json"]

    def test_concurrent_appends_in_one_process_are_not_lost(self, tmp_path: Path) -> None:
        """Appends from several threads are serialized."""
        store = SubmissionStore(tmp_path / "submissions.json")
        records = [Submission.create(name=f"Client {i}").to_dict() for i in range(20)]
        threads = [threading.Thread(target=store.append, args=(record,)) for record in records]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stored = store.read_all()["submissions"]
        assert len(stored) == 20
        assert {r["id"] for r in stored} == {r["id"] for r in records}


def test_get_submission_store_uses_settings(settings, tmp_path: Path) -> None:
    """The store follows the configured SUBMISSIONS_FILE."""
    settings.SUBMISSIONS_FILE = tmp_path / "custom.json"
    assert get_submission_store().path == tmp_path / "custom.json"
