"""Get attachments use case."""

from typing import List, Optional

from src.application.interfaces.crm import CRMProviderInterface
from src.config.logging import get_logger
from src.domain.entities.attachment import PhotoAttachment
from src.domain.exceptions.crm_error import CRMAPIError

logger = get_logger(__name__)


class GetAttachmentsUseCase:
    """Use case for resolving message attachment ids to displayable photos."""

    def __init__(self, crm: CRMProviderInterface):
        self.crm = crm

    async def execute(self, attachment_ids: Optional[List[str]]) -> List[PhotoAttachment]:
        if not attachment_ids:
            return []

        photos: List[PhotoAttachment] = []
        for file_id in attachment_ids:
            try:
                attachment = await self.crm.get_attachment(file_id)
            except CRMAPIError as e:
                logger.warning(
                    "Skipping attachment that could not be fetched",
                    file_id=file_id,
                    status_code=e.status_code,
                    error=e.message,
                )
                continue

            if attachment.is_displayable():
                photos.append(attachment)

        logger.info(
            "Attachments fetched",
            requested=len(attachment_ids),
            displayed=len(photos),
        )
        return photos
