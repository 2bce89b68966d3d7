# app/pages/tips.py
"""
Server-rendered BBQ tips page.

The tip list is static and always rendered. The contributors section ships in
the loading state; the page script requests /api/contributors once and swaps
in the error fragment or a grid of contributor cards, both taken from
<template> elements rendered from the same partials.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.models.tips import TIPS

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR), autoescape=True)

router = APIRouter(tags=["pages"])


@router.get("/tips", response_class=HTMLResponse)
def tips_page(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "tips.html",
        {"tips": TIPS, "contributors_url": "/api/contributors"},
    )
