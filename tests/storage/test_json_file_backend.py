from src.site_timeclock.site_timeclock.sites.model import Site
from src.site_timeclock.site_timeclock.storage.json_file_backend import JsonFileBackend
from src.site_timeclock.site_timeclock.storage.store import RecordStore


def test_missing_key_reads_as_none(tmp_path):
    backend = JsonFileBackend(tmp_path / "data")

    assert backend.get("cp_logs") is None


def test_documents_persist_across_instances(tmp_path):
    data_dir = tmp_path / "data"
    RecordStore(JsonFileBackend(data_dir)).save_sites([Site(id="7", name="Ponte Leste")])

    reopened = RecordStore(JsonFileBackend(data_dir))

    assert reopened.get_sites() == [Site(id="7", name="Ponte Leste")]
    assert (data_dir / "cp_sites.json").exists()
