"""
Release Archive Builder
Packs the pages of a release into a reproducible zip and keeps the
cached checksum on the release up to date
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional
import io
import logging
import zipfile
import zlib

from ims_release.errors import ImsReleaseError, NotFoundError, StorageError
from ims_release.models.page import Page
from ims_release.models.project import Project
from ims_release.models.release import Release
from ims_release.services.pages import generate_page_key
from ims_release.services.release_lifecycle import apply_checksum, generate_archive_name

logger = logging.getLogger(__name__)

# Fixed entry metadata so identical pages give identical bytes
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
ENTRY_MODE = 0o100644
CREATE_SYSTEM_UNIX = 3


@dataclass
class Archive:
    """A built release archive"""

    name: str
    data: bytes
    checksum: str
    update_error: Optional[Exception] = None


def compute_checksum(data: bytes) -> str:
    """CRC32 (IEEE) of data as 8 lowercase hex characters"""
    return f"{zlib.crc32(data) & 0xffffffff:08x}"


def build_archive(pages: Iterable[Page], read_page: Callable[[Page], bytes]) -> bytes:
    """
    Zip pages in name order, each stored under its page name

    read_page is called once per page, in order; its exceptions abort the
    build.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for page in sorted(pages, key=lambda p: p.name):
            info = zipfile.ZipInfo(page.name, date_time=ZIP_EPOCH)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.create_system = CREATE_SYSTEM_UNIX
            info.external_attr = ENTRY_MODE << 16
            zf.writestr(info, read_page(page))
    return buffer.getvalue()


class ArchiveBuilder:
    """
    Builds the archive of a release from the repository and blob store
    """

    def __init__(self, repository, blob_store):
        self.repository = repository
        self.blob_store = blob_store

    def _reader(self, project: Project, release: Release) -> Callable[[Page], bytes]:
        def read_page(page: Page) -> bytes:
            key = generate_page_key(project.id, release.id, page.name)
            try:
                return self.blob_store.get(key)
            except NotFoundError:
                logger.error(f"Page {page.id} has no stored image at {key}")
                raise StorageError(f"Stored image missing for page '{page.name}'.")
        return read_page

    def build(self, project: Project, release: Release) -> Archive:
        """
        Build the archive and refresh the stored checksum when it changed

        A failed checksum refresh does not fail the build; it is reported
        in Archive.update_error.
        """
        pages = self.repository.list_pages(release)
        data = build_archive(pages, self._reader(project, release))
        checksum = compute_checksum(data)
        archive = Archive(name=generate_archive_name(project, release), data=data, checksum=checksum)

        if checksum != release.checksum:
            logger.info(f"Release {release.id} checksum changed: {release.checksum or '-'} -> {checksum}")
            try:
                self.repository.update_release(apply_checksum(release, checksum))
            except ImsReleaseError as e:
                logger.warning(f"Could not store checksum for release {release.id}: {e.message}")
                archive.update_error = e

        return archive
