from __future__ import annotations

from mailbreeze.models import Attachment, CreateUploadParams, UploadUrl
from mailbreeze.resources.base import Resource


class AttachmentsResource(Resource):
    async def create_upload(self, params: CreateUploadParams) -> UploadUrl | None:
        """첨부 파일을 올릴 pre-signed URL을 받아요."""
        return await self._transport.post("/attachments/presigned-url", params, response_model=UploadUrl)

    async def confirm(self, attachment_id: str) -> Attachment | None:
        return await self._transport.post(f"/attachments/{attachment_id}/confirm", response_model=Attachment)
