"""
Crocodoc Download API

This module provides access to the Download API, used for downloading the
original of a document, a PDF of a document, a thumbnail of a document and
the text extracted from a document.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

from crocodoc.constants import (
    DOWNLOAD_API_PATH,
    RESOURCE_DOCUMENT,
    RESOURCE_TEXT,
    RESOURCE_THUMBNAIL,
)
from crocodoc.exceptions import ValidationError
from crocodoc.log_utils import logger
from crocodoc.transport import CrocodocTransport, ParamValue, Requester

AnnotationFilter = Union[None, str, Sequence[str]]


def normalize_annotation_filter(annotation_filter: AnnotationFilter) -> Optional[str]:
    """
    Collapse an annotation filter into its query-string form.

    Parameters:
        annotation_filter: None, a single filter string (e.g. "all", "none" or
            a user ID), or a sequence of user IDs.

    Returns:
        Optional[str]: The filter string with sequences comma-joined, or None
            when the filter is empty.
    """
    if not annotation_filter:
        return None
    if isinstance(annotation_filter, str):
        return annotation_filter
    joined = ",".join(str(item) for item in annotation_filter)
    return joined or None


@dataclass(frozen=True)
class DownloadRequest:
    """The arguments of a single Download API call."""

    uuid: str
    """The uuid of the document to download"""

    as_pdf: bool = False
    """Whether the document should be downloaded as a PDF"""

    with_annotations: bool = False
    """Whether annotations should be burned into the download"""

    annotation_filter: AnnotationFilter = None
    """Which users' annotations to include; only used with annotations"""

    width: Optional[int] = None
    """Thumbnail width in pixels"""

    height: Optional[int] = None
    """Thumbnail height in pixels"""

    def document_params(self) -> Dict[str, ParamValue]:
        params: Dict[str, ParamValue] = {"uuid": self.uuid}
        if self.as_pdf:
            params["pdf"] = "true"

        if self.with_annotations:
            params["annotated"] = 1
            annotation_filter = normalize_annotation_filter(self.annotation_filter)
            if annotation_filter:
                params["filter"] = annotation_filter

        return params

    def text_params(self) -> Dict[str, ParamValue]:
        return {"uuid": self.uuid}

    def thumbnail_params(self) -> Dict[str, ParamValue]:
        """
        Build thumbnail query parameters.

        A size is only added when both dimensions are given; a single
        dimension is ignored.

        Raises:
            ValidationError: `invalid_width` or `invalid_height` (checked in
                that order) when a given dimension is below 1.
        """
        params: Dict[str, ParamValue] = {"uuid": self.uuid}

        if self.width is not None and self.height is not None:
            if self.width < 1:
                raise ValidationError(
                    "invalid_width",
                    DownloadClient.__name__,
                    "fetch_thumbnail",
                    field="width",
                    value=self.width,
                )
            if self.height < 1:
                raise ValidationError(
                    "invalid_height",
                    DownloadClient.__name__,
                    "fetch_thumbnail",
                    field="height",
                    value=self.height,
                )
            params["size"] = f"{self.width}x{self.height}"

        return params


class DownloadClient:
    """
    Client for the Crocodoc Download API.

    Every call builds its query parameters and hands them to the injected
    requester; response bytes and requester errors are returned or raised
    unchanged.

    Usage:
        client = DownloadClient.from_config(load_config())
        pdf_bytes = client.fetch_document(uuid, as_pdf=True)
    """

    path = DOWNLOAD_API_PATH

    def __init__(self, requester: Requester):
        self.requester = requester

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "DownloadClient":
        """
        Create a client backed by a CrocodocTransport built from `config`.

        Raises:
            ConfigurationError: If no API token is configured or a setting is invalid.
        """
        return cls(CrocodocTransport.from_config(config, cls.path))

    def _download(self, resource: str, params: Dict[str, ParamValue]) -> bytes:
        logger.debug(f"Downloading {resource} for {params['uuid']}")
        return self.requester.request(resource, params, None, False)

    def fetch_document(
        self,
        uuid: str,
        as_pdf: bool = False,
        with_annotations: bool = False,
        annotation_filter: AnnotationFilter = None,
    ) -> bytes:
        """
        Download a document's original file, optionally as a PDF and with annotations.

        Parameters:
            uuid (str): The uuid of the document to download.
            as_pdf (bool): Download the document as a PDF.
            with_annotations (bool): Include annotations in the download.
            annotation_filter: Which annotations to include: a filter string or
                a sequence of user IDs. Ignored unless `with_annotations` is True.

        Returns:
            bytes: The downloaded file contents.
        """
        request = DownloadRequest(
            uuid=uuid,
            as_pdf=as_pdf,
            with_annotations=with_annotations,
            annotation_filter=annotation_filter,
        )
        return self._download(RESOURCE_DOCUMENT, request.document_params())

    def fetch_text(self, uuid: str) -> bytes:
        """Download the text extracted from a document."""
        request = DownloadRequest(uuid=uuid)
        return self._download(RESOURCE_TEXT, request.text_params())

    def fetch_thumbnail(
        self,
        uuid: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> bytes:
        """
        Download a document's thumbnail with an optional size.

        Parameters:
            uuid (str): The uuid of the document.
            width (Optional[int]): Thumbnail width; only applied together with `height`.
            height (Optional[int]): Thumbnail height; only applied together with `width`.

        Returns:
            bytes: The thumbnail image contents.

        Raises:
            ValidationError: If both dimensions are given and either is below 1.
                No request is made in that case.
        """
        request = DownloadRequest(uuid=uuid, width=width, height=height)
        return self._download(RESOURCE_THUMBNAIL, request.thumbnail_params())
