import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence

from presentations.api_client import PresentationApiClient
from presentations.errors import DeleteError, FetchError, UploadError
from presentations.formatting import format_size_limit
from presentations.schemas.files import FileEntry, UploadOutcome
from presentations.services.file_filter import Category, filter_files

logger = logging.getLogger("presentations.services.workspace")


class UploadSource(Protocol):
    """Anything shaped like Streamlit's ``UploadedFile``."""

    name: str
    size: int
    type: Optional[str]

    def getvalue(self) -> bytes: ...


@dataclass
class UploadCandidate:
    name: str
    size: int
    content: bytes
    content_type: Optional[str] = None

    @classmethod
    def from_source(cls, source: UploadSource) -> "UploadCandidate":
        return cls(
            name=source.name,
            size=source.size,
            content=source.getvalue(),
            content_type=getattr(source, "type", None),
        )


class FileWorkspace:
    """State and actions of the file grid once the session is authenticated.

    Every mutation is followed by a full re-fetch; the local list is never
    patched. Errors are turned into ``error`` (banner) or ``notices`` (alerts)
    and never propagate to the caller.
    """

    def __init__(self, api: PresentationApiClient):
        self.api = api
        self.files: List[FileEntry] = []
        self.search_term = ""
        self.category = Category.ALL
        self.loading = False
        self.uploading = False
        self.error = ""
        self.notices: List[str] = []
        self._refresh_generation = 0

    # --- Listing ---

    async def refresh(self) -> List[FileEntry]:
        self._refresh_generation += 1
        generation = self._refresh_generation
        self.loading = True
        logger.debug("Refreshing file list (generation=%d)", generation)
        try:
            files = await self.api.list_files()
        except FetchError as e:
            if generation == self._refresh_generation:
                self.error = e.message
            logger.warning("Refresh %d failed, keeping %d displayed files", generation, len(self.files))
            return self.files
        finally:
            if generation == self._refresh_generation:
                self.loading = False

        if generation != self._refresh_generation:
            logger.debug(
                "Discarding stale refresh %d (latest is %d)", generation, self._refresh_generation
            )
            return self.files

        self.files = files
        logger.debug("File list replaced — %d files", len(files))
        return self.files

    def visible_files(self) -> List[FileEntry]:
        return filter_files(
            self.files, self.search_term, self.category, self.api.settings
        )

    # --- Upload ---

    async def upload(self, candidates: Sequence[UploadCandidate]) -> List[UploadOutcome]:
        """Uploads one file at a time; a failed file never stops the batch."""
        max_bytes = self.api.settings.MAX_UPLOAD_BYTES
        outcomes = []
        self.uploading = True
        logger.debug("Upload batch started — %d files", len(candidates))
        try:
            for candidate in candidates:
                if candidate.size > max_bytes:
                    message = f"{candidate.name} is too large. Max {format_size_limit(max_bytes)}."
                    logger.warning("Skipping '%s' — %d bytes exceeds limit", candidate.name, candidate.size)
                    self.notices.append(message)
                    outcomes.append(UploadOutcome(name=candidate.name, status="too_large", message=message))
                    continue

                try:
                    await self.api.upload_file(candidate.name, candidate.content, candidate.content_type)
                except UploadError as e:
                    self.notices.append(e.message)
                    status = "rejected" if e.reason == "rejected" else "failed"
                    outcomes.append(UploadOutcome(name=candidate.name, status=status, message=e.message))
                    continue

                outcomes.append(UploadOutcome(name=candidate.name, status="uploaded"))
                await self.refresh()
        finally:
            self.uploading = False

        logger.info(
            "Upload batch finished — %d/%d uploaded",
            sum(1 for o in outcomes if o.ok), len(outcomes),
        )
        return outcomes

    # --- Delete ---

    async def delete(self, name: str, confirm: Callable[[str], bool]) -> bool:
        if not confirm(name):
            logger.debug("Delete of '%s' declined", name)
            return False
        try:
            await self.api.delete_file(name)
        except DeleteError as e:
            self.notices.append(e.message)
            return False
        await self.refresh()
        return True

    # --- View / Download ---

    def view_url(self, name: str) -> str:
        return self.api.download_url(name)

    def download_url(self, name: str) -> str:
        return self.api.download_url(name)

    def take_notices(self) -> List[str]:
        notices, self.notices = self.notices, []
        return notices
