"""FastAPI backend - Cutplan web application"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from ..config import CuttingConfig
from ..ingest import expand_quantity
from ..report import render_html
from ..stats import compute_statistics
from ..strategies import GridFirstFitPacker

app = FastAPI(title="Cutplan - board cutting planner")

# CORS (development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PieceInput(BaseModel):
    """Piece input model"""
    name: str
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    thickness: float = Field(default=16, gt=0)
    quantity: int = Field(default=1, ge=1)


class CuttingRequest(CuttingConfig):
    """Cutting request model: boards, kerf, margin and step plus the pieces"""
    pieces: list[PieceInput]


class CuttingResponse(BaseModel):
    """Cutting response model"""
    success: bool
    boards: list[dict]
    stats: dict
    excluded: list[dict]
    dropped: list[dict]


def _optimize(request: CuttingRequest):
    if not request.pieces:
        raise HTTPException(status_code=400, detail="Nothing to optimize: no pieces given")

    pieces = []
    for p in request.pieces:
        pieces.extend(expand_quantity(p.name, p.width, p.height, p.thickness, p.quantity))

    config = CuttingConfig.model_validate(request.model_dump(exclude={"pieces"}))
    result = GridFirstFitPacker(config).pack(pieces)
    stats = compute_statistics(result.boards, total_pieces=result.total_pieces)
    return config, result, stats


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/optimize", response_model=CuttingResponse)
async def optimize(request: CuttingRequest):
    """Cutting plan API"""
    _, result, stats = _optimize(request)
    data = result.to_dict()

    return CuttingResponse(
        success=bool(result.boards),
        boards=data['boards'],
        stats=stats.to_dict(),
        excluded=data['excluded'],
        dropped=data['dropped'],
    )


@app.post("/api/report", response_class=HTMLResponse)
async def report(request: CuttingRequest):
    """HTML cutting plan"""
    config, result, stats = _optimize(request)
    return HTMLResponse(render_html(result, stats, config.margin))
