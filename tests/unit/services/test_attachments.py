"""
Tests unitaires pour AttachmentService.

Verifie l'ordre des controles (ordre, politique, stockage, enregistrement)
et le caractere tout-ou-rien de l'envoi.
"""

from pathlib import Path

import pytest

from osservice.core.entities import Attachment, AttachmentType
from osservice.core.errors import (
    InvalidSizeError,
    NotFoundError,
    StorageError,
    UnsupportedTypeError,
)
from osservice.services.attachments import AttachmentService, storage_key

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def service(mock_order_repo, mock_attachment_repo, mock_storage) -> AttachmentService:
    return AttachmentService(
        order_repo=mock_order_repo,
        attachment_repo=mock_attachment_repo,
        storage=mock_storage,
    )


def _upload(service, order_id, **overrides):
    params = {
        "order_id": order_id,
        "attachment_type": AttachmentType.BEFORE,
        "file_name": "Tela Quebrada.PNG",
        "content_type": "image/png",
        "size_bytes": len(PNG_BYTES),
        "data": PNG_BYTES,
    }
    params.update(overrides)
    return service.upload(**params)


class TestUpload:
    """Tests pour upload()."""

    def test_upload_stores_and_records(
        self, service, mock_order_repo, mock_attachment_repo, mock_storage, open_order
    ):
        mock_order_repo.get_by_id.return_value = open_order

        attachment_id = _upload(service, open_order.id)

        expected_path = f"{open_order.id}_{attachment_id}.png"
        mock_storage.write_exclusive.assert_called_once_with(expected_path, PNG_BYTES)

        recorded = mock_attachment_repo.insert.call_args.args[0]
        assert isinstance(recorded, Attachment)
        assert recorded.id == attachment_id
        assert recorded.service_order_id == open_order.id
        assert recorded.type is AttachmentType.BEFORE
        assert recorded.file_name == "Tela Quebrada.PNG"
        assert recorded.storage_path == expected_path
        assert recorded.size_bytes == len(PNG_BYTES)
        assert recorded.uploaded_at is not None

    def test_upload_allowed_on_finished_order(self, service, mock_order_repo, open_order):
        open_order.start()
        open_order.update_price(10)
        open_order.finish()
        mock_order_repo.get_by_id.return_value = open_order

        assert _upload(service, open_order.id, attachment_type=AttachmentType.AFTER)

    def test_unknown_order(self, service, mock_storage, mock_attachment_repo):
        with pytest.raises(NotFoundError):
            _upload(service, "missing")

        mock_storage.write_exclusive.assert_not_called()
        mock_attachment_repo.insert.assert_not_called()

    def test_unsupported_type_writes_nothing(
        self, service, mock_order_repo, mock_storage, open_order
    ):
        mock_order_repo.get_by_id.return_value = open_order

        with pytest.raises(UnsupportedTypeError):
            _upload(service, open_order.id, content_type="application/pdf", file_name="a.pdf")

        mock_storage.write_exclusive.assert_not_called()

    def test_oversize_writes_nothing(self, service, mock_order_repo, mock_storage, open_order):
        mock_order_repo.get_by_id.return_value = open_order

        with pytest.raises(InvalidSizeError):
            _upload(service, open_order.id, size_bytes=5 * 1024 * 1024 + 1)

        mock_storage.write_exclusive.assert_not_called()

    def test_storage_failure_records_nothing(
        self, service, mock_order_repo, mock_attachment_repo, mock_storage, open_order
    ):
        mock_order_repo.get_by_id.return_value = open_order
        mock_storage.write_exclusive.side_effect = StorageError("disque plein")

        with pytest.raises(StorageError):
            _upload(service, open_order.id)

        mock_attachment_repo.insert.assert_not_called()

    def test_record_failure_deletes_file(
        self, service, mock_order_repo, mock_attachment_repo, mock_storage, open_order
    ):
        mock_order_repo.get_by_id.return_value = open_order
        mock_attachment_repo.insert.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError):
            _upload(service, open_order.id)

        written_path = mock_storage.write_exclusive.call_args.args[0]
        mock_storage.delete.assert_called_once_with(written_path)

    def test_each_upload_gets_distinct_path(self, service, mock_order_repo, mock_storage, open_order):
        mock_order_repo.get_by_id.return_value = open_order

        _upload(service, open_order.id)
        _upload(service, open_order.id)

        paths = [c.args[0] for c in mock_storage.write_exclusive.call_args_list]
        assert len(set(paths)) == 2


class TestReadAttachments:
    """Tests pour list_attachments(), get_attachment() et open_attachment()."""

    def _attachment(self, order_id: str) -> Attachment:
        return Attachment(
            id="att-1",
            service_order_id=order_id,
            type=AttachmentType.AFTER,
            file_name="depois.jpg",
            content_type="image/jpeg",
            size_bytes=10,
            storage_path=storage_key(order_id, "att-1", ".jpg"),
        )

    def test_list_requires_order(self, service):
        with pytest.raises(NotFoundError):
            service.list_attachments("missing")

    def test_list(self, service, mock_order_repo, mock_attachment_repo, open_order):
        mock_order_repo.get_by_id.return_value = open_order
        attachment = self._attachment(open_order.id)
        mock_attachment_repo.list_by_order.return_value = [attachment]

        assert service.list_attachments(open_order.id) == [attachment]
        mock_attachment_repo.list_by_order.assert_called_once_with(open_order.id)

    def test_get_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.get_attachment("missing")

    def test_open_returns_resolved_path(self, service, mock_attachment_repo, mock_storage):
        attachment = self._attachment("order-1")
        mock_attachment_repo.get_by_id.return_value = attachment
        mock_storage.resolve.return_value = Path("/uploads/order-1_att-1.jpg")

        result, path = service.open_attachment("att-1")

        assert result is attachment
        assert path == Path("/uploads/order-1_att-1.jpg")
        mock_storage.resolve.assert_called_once_with("order-1_att-1.jpg")

    def test_open_missing_file(self, service, mock_attachment_repo, mock_storage):
        mock_attachment_repo.get_by_id.return_value = self._attachment("order-1")
        mock_storage.exists.return_value = False

        with pytest.raises(NotFoundError):
            service.open_attachment("att-1")


def test_storage_key():
    assert storage_key("o", "a", ".png") == "o_a.png"
