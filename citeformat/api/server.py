"""FastAPI application entry point."""

from fastapi import FastAPI

from citeformat.api.routes_format import router as format_router
from citeformat.api.routes_search import router as search_router

app = FastAPI(title="citeformat", description="Citation formatting and PubMed search")

app.include_router(format_router)
app.include_router(search_router)
