"""Download de resultados de uma busca em txt/json/html."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from app.services.report_formats import DownloadFormat, render_download

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/download")
async def download_results(request: Request) -> Response:
    """GET /download?searchId=<id>&format=txt|json|html"""
    from app.bootstrap import get_breach_store

    search_id = request.query_params.get("searchId")
    if not search_id:
        return Response(
            content="Missing searchId parameter",
            media_type="text/plain",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    fmt = DownloadFormat.parse(request.query_params.get("format"))
    try:
        results = await get_breach_store().get_results(search_id)
    except Exception:
        logger.exception("download_failed", extra={"search_id": search_id})
        return Response(
            content="Internal server error",
            media_type="text/plain",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if not results:
        return Response(
            content="No results found",
            media_type="text/plain",
            status_code=status.HTTP_404_NOT_FOUND,
        )

    content, content_type, filename = render_download(results, fmt, search_id)
    logger.info(
        "download_served",
        extra={"search_id": search_id, "format": fmt.value, "result_count": len(results)},
    )
    return Response(
        content=content.encode("utf-8"),
        media_type=content_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
