"""
Routes du catalogue: upload, lecture, mise à jour et suppression.

Les soumissions multipart sont converties en FilePart puis confiées aux
services ; les appels bloquants (disque, SQLite) tournent dans un thread.
"""

import asyncio
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import FormData, UploadFile

from ...core.entities.catalog import CatalogEntry
from ...core.value_objects.upload import FilePart
from ...services.query import QueryService
from ...services.upload import UploadService
from ..deps import get_optional_principal_id, get_query_service, get_upload_service

router = APIRouter(prefix="/api")


def entry_payload(entry: CatalogEntry) -> dict[str, Any]:
    """Représentation JSON d'une entrée."""
    return {
        "id": entry.id,
        "title": entry.title,
        "description": entry.description,
        "thumbnailRefs": list(entry.thumbnail_refs),
        "videoRefs": list(entry.video_refs),
        "ownerId": entry.owner_id,
        "createdAt": entry.created_at.isoformat() if entry.created_at else None,
        "updatedAt": entry.updated_at.isoformat() if entry.updated_at else None,
    }


def _file_parts(form: FormData) -> list[FilePart]:
    """Parties fichiers de la soumission, dans l'ordre d'envoi."""
    parts = []
    for field_name, value in form.multi_items():
        if isinstance(value, UploadFile):
            parts.append(
                FilePart(
                    field_name=field_name,
                    content_type=value.content_type or "",
                    filename=value.filename or "",
                    stream=value.file,
                )
            )
    return parts


def _text_field(form: FormData, name: str) -> Optional[str]:
    """Valeur texte d'un champ, ou None s'il est absent."""
    value = form.get(name)
    return value if isinstance(value, str) else None


@router.post("/upload")
async def create_upload(
    request: Request,
    service: UploadService = Depends(get_upload_service),
    principal_id: Optional[str] = Depends(get_optional_principal_id),
):
    """Crée une entrée à partir d'une miniature et d'une vidéo (au moins)."""
    async with request.form() as form:
        owner_id = _text_field(form, "ownerId") or principal_id
        entry = await asyncio.to_thread(
            service.create,
            _file_parts(form),
            owner_id,
            _text_field(form, "title"),
            _text_field(form, "description"),
        )
    return JSONResponse(
        {
            "status": "created",
            "message": "Files uploaded and data saved successfully",
            "data": entry_payload(entry),
        },
        status_code=201,
    )


@router.get("/videos")
async def list_videos(
    title: Optional[str] = None,
    service: QueryService = Depends(get_query_service),
):
    """Liste toutes les entrées, ou celles dont le titre contient `title`."""
    entries = await asyncio.to_thread(service.list_entries, title)
    if not entries:
        return {"status": "empty", "message": "No entries found", "data": []}
    return {"status": "ok", "data": [entry_payload(entry) for entry in entries]}


@router.get("/videos/{entry_id}")
async def get_video(entry_id: str, service: QueryService = Depends(get_query_service)):
    """Détail d'une entrée."""
    entry = await asyncio.to_thread(service.get_by_id, entry_id)
    return {"status": "ok", "data": entry_payload(entry)}


@router.put("/videos/{entry_id}")
async def update_video(
    entry_id: str,
    request: Request,
    service: UploadService = Depends(get_upload_service),
):
    """
    Met à jour une entrée.

    Les champs texte vides sont ignorés ; une famille de fichiers soumise
    remplace la liste existante.
    """
    async with request.form() as form:
        entry = await asyncio.to_thread(
            service.update,
            entry_id,
            _file_parts(form),
            _text_field(form, "title") or None,
            _text_field(form, "description") or None,
        )
    return {
        "status": "updated",
        "message": "Video updated successfully",
        "data": entry_payload(entry),
    }


@router.delete("/videos/{entry_id}")
async def delete_video(entry_id: str, service: UploadService = Depends(get_upload_service)):
    """Supprime une entrée et retourne son état antérieur."""
    previous = await asyncio.to_thread(service.delete, entry_id)
    return {
        "status": "deleted",
        "message": "Video deleted successfully",
        "data": entry_payload(previous),
    }
