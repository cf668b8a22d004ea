"""Serve relatórios de overflow gravados pelo exportador."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

router = APIRouter()


@router.get("/files/{blob_id}")
async def get_file(blob_id: str) -> Response:
    from app.bootstrap import get_blob_store

    blob = await get_blob_store().get(blob_id)
    if blob is None:
        return Response(
            content="Not Found",
            media_type="text/plain",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return Response(
        content=blob.content,
        media_type=blob.content_type,
        headers={"Content-Disposition": f'attachment; filename="{blob.filename}"'},
    )
