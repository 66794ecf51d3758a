"""
Tests for the approval overlay and its stores
"""
import json
import threading

from review_dashboard.persistence import StatusOverlay, JsonFileStore, MemoryStore, create_overlay
from review_dashboard.persistence.status_overlay import effective_status

from factories import make_review


class TestStatusOverlay:
    """Approve/reject semantics"""

    def test_approve_is_idempotent(self, overlay):
        overlay.approve('hostaway-1')
        overlay.approve('hostaway-1')

        assert overlay.is_approved('hostaway-1')
        assert overlay.approved_ids() == ['hostaway-1']

    def test_reject_removes_approval(self, overlay):
        overlay.approve('hostaway-1')
        overlay.reject('hostaway-1')

        assert not overlay.is_approved('hostaway-1')

    def test_reject_unknown_id_is_noop(self, overlay):
        overlay.reject('hostaway-404')
        assert overlay.approved_ids() == []

    def test_clear(self, overlay):
        overlay.approve('hostaway-1')
        overlay.approve('hostaway-2')
        overlay.clear()

        assert overlay.approved_ids() == []

    def test_only_approved_entries_count(self):
        overlay = StatusOverlay(MemoryStore({'hostaway-1': 'approved', 'hostaway-2': 'other'}))
        assert overlay.approved_ids() == ['hostaway-1']


class TestFileOverlay:
    """Durability through the JSON file store"""

    def test_approval_survives_new_instance(self, tmp_path):
        path = str(tmp_path / 'approved.json')
        StatusOverlay(JsonFileStore(path)).approve('hostaway-7453')

        assert StatusOverlay(JsonFileStore(path)).is_approved('hostaway-7453')

    def test_file_contents(self, tmp_path, file_overlay):
        file_overlay.approve('hostaway-7453')

        with open(tmp_path / 'approved.json', encoding='utf-8') as f:
            assert json.load(f) == {'hostaway-7453': 'approved'}

    def test_missing_directory_is_created(self, tmp_path):
        path = tmp_path / 'nested' / 'dir' / 'approved.json'
        StatusOverlay(JsonFileStore(str(path))).approve('hostaway-1')
        assert path.exists()

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / 'approved.json'
        path.write_text('{not json', encoding='utf-8')
        overlay = StatusOverlay(JsonFileStore(str(path)))

        assert not overlay.is_approved('hostaway-1')
        assert overlay.approved_ids() == []

    def test_approve_replaces_corrupt_file(self, tmp_path):
        path = tmp_path / 'approved.json'
        path.write_text('[1, 2, 3]', encoding='utf-8')
        overlay = StatusOverlay(JsonFileStore(str(path)))

        overlay.approve('hostaway-1')

        assert overlay.approved_ids() == ['hostaway-1']

    def test_concurrent_approvals_are_all_kept(self, file_overlay):
        review_ids = [f'hostaway-{n}' for n in range(200)]

        def approve_share(offset):
            for review_id in review_ids[offset::8]:
                file_overlay.approve(review_id)

        threads = [threading.Thread(target=approve_share, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(file_overlay.approved_ids()) == sorted(review_ids)

    def test_no_temporary_files_left_behind(self, tmp_path, file_overlay):
        file_overlay.approve('hostaway-1')
        file_overlay.reject('hostaway-1')
        file_overlay.clear()

        assert [p.name for p in tmp_path.iterdir()] == ['approved.json']

    def test_write_failure_is_not_raised(self, tmp_path):
        # A directory where the file should be makes every write fail
        path = tmp_path / 'approved.json'
        path.mkdir()
        overlay = StatusOverlay(JsonFileStore(str(path)))

        overlay.approve('hostaway-1')

        assert not overlay.is_approved('hostaway-1')


class TestEffectiveStatus:

    def test_overlay_wins(self, overlay):
        review = make_review(id='hostaway-1', status='rejected')
        overlay.approve('hostaway-1')
        assert effective_status(review, overlay) == 'approved'

    def test_falls_back_to_review_status(self, overlay):
        assert effective_status(make_review(status='pending'), overlay) == 'pending'
        assert effective_status(make_review(status='rejected'), overlay) == 'rejected'


def test_create_overlay_backends(tmp_path):
    assert isinstance(create_overlay('memory').store, MemoryStore)

    overlay = create_overlay('json', str(tmp_path / 'overlay.json'))
    assert isinstance(overlay.store, JsonFileStore)
    assert overlay.store.filename.endswith('overlay.json')
