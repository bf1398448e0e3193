"""
FileAPI - 图片与文件的上传下载

上传接口以 multipart 发送（is_file），下载接口直接返回原始字节（is_file_download）。
需要开启机器人能力；只能下载应用自己上传的资源。
"""

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.base import DownloadResponse
from lark_sdk.schemas.im import (
    DownloadFileReq,
    DownloadImageReq,
    UploadFileReq,
    UploadFileResp,
    UploadImageReq,
    UploadImageResp,
)

UPLOAD_IMAGE = Endpoint(
    scope="File",
    api="UploadImage",
    method="POST",
    path="/open-apis/im/v1/images",
    body=("image_type", "image"),
    response=UploadImageResp,
    need_tenant_access_token=True,
    is_file=True,
)
DOWNLOAD_IMAGE = Endpoint(
    scope="File",
    api="DownloadImage",
    method="GET",
    path="/open-apis/im/v1/images/:image_key",
    response=DownloadResponse,
    need_tenant_access_token=True,
    is_file_download=True,
)
UPLOAD_FILE = Endpoint(
    scope="File",
    api="UploadFile",
    method="POST",
    path="/open-apis/im/v1/files",
    body=("file_type", "file_name", "duration", "file"),
    response=UploadFileResp,
    need_tenant_access_token=True,
    is_file=True,
)
DOWNLOAD_FILE = Endpoint(
    scope="File",
    api="DownloadFile",
    method="GET",
    path="/open-apis/im/v1/files/:file_key",
    response=DownloadResponse,
    need_tenant_access_token=True,
    is_file_download=True,
)


class FileAPI(BaseAPI):
    async def upload_image(self, request: UploadImageReq) -> UploadImageResp:
        """上传图片，支持 JPEG、PNG、WEBP、GIF、TIFF、BMP、ICO，不超过 10MB"""
        return await self._call(UPLOAD_IMAGE, request)

    async def download_image(self, request: DownloadImageReq) -> DownloadResponse:
        return await self._call(DOWNLOAD_IMAGE, request)

    async def upload_file(self, request: UploadFileReq) -> UploadFileResp:
        """上传文件，不允许上传空文件"""
        return await self._call(UPLOAD_FILE, request)

    async def download_file(self, request: DownloadFileReq) -> DownloadResponse:
        return await self._call(DOWNLOAD_FILE, request)
