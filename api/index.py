from functools import lru_cache
import logging
import os
from pathlib import Path
import sys

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bean_match import MatchingConfig, MatchingEngine  # noqa: E402
from bean_match.exceptions import TaxonomyError  # noqa: E402
from bean_match.schema import MatchDetails, SelectedFlavors, SensoryAttributes  # noqa: E402
from bean_match.taxonomy import FlavorTaxonomy  # noqa: E402

app = FastAPI(title="bean-match API", version="1.0.0")
logger = logging.getLogger(__name__)

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
TAXONOMY_VERSION = os.getenv("TAXONOMY_VERSION", "v1")
try:
    MAX_NOTES_CHARS = int(os.getenv("MAX_NOTES_CHARS", "2000"))
except ValueError:
    MAX_NOTES_CHARS = 2000

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class MatchRequest(BaseModel):
    roasterNotes: str = ""
    selectedFlavors: SelectedFlavors = Field(default_factory=SelectedFlavors)
    sensoryAttributes: SensoryAttributes = Field(default_factory=SensoryAttributes)
    includeDetails: bool = False


class MatchDetailsResponse(BaseModel):
    matchedFlavors: list[str] = Field(default_factory=list)
    unmatchedFlavors: list[str] = Field(default_factory=list)
    sensoryMatches: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class MatchResponse(BaseModel):
    total: int
    flavorScore: int
    sensoryScore: int
    highMatch: bool
    details: MatchDetailsResponse | None = None
    warnings: list[str] = Field(default_factory=list)


class TaxonomyOption(BaseModel):
    level: int
    label_en: str
    label_ko: str | None = None
    parents: list[str] = Field(default_factory=list)


class TaxonomyOptionsResponse(BaseModel):
    version: str
    level: int | None = None
    total: int
    options: list[TaxonomyOption]


class TaxonomyLatestResponse(BaseModel):
    latest: str
    options_url: str


@lru_cache(maxsize=8)
def _load_engine(version: str) -> MatchingEngine:
    return MatchingEngine(config=MatchingConfig(taxonomy_version=version))


@lru_cache(maxsize=8)
def _load_taxonomy_options(version: str) -> list[TaxonomyOption]:
    taxonomy = FlavorTaxonomy(version=version)
    options: list[TaxonomyOption] = []
    for level in range(1, 5):
        for term in taxonomy.level_terms(level):
            options.append(
                TaxonomyOption(
                    level=level,
                    label_en=term,
                    label_ko=taxonomy.translate(term),
                    parents=taxonomy.parents_at(level, term),
                )
            )
    return options


def _details_response(details: MatchDetails) -> MatchDetailsResponse:
    return MatchDetailsResponse(
        matchedFlavors=details.matched_flavors,
        unmatchedFlavors=details.unmatched_flavors,
        sensoryMatches=details.sensory_matches,
        suggestions=details.suggestions,
    )


@app.get("/taxonomy/latest", response_model=TaxonomyLatestResponse)
def taxonomy_latest(response: Response) -> TaxonomyLatestResponse:
    response.headers["Cache-Control"] = "public, max-age=60"
    return TaxonomyLatestResponse(
        latest=TAXONOMY_VERSION,
        options_url=f"/taxonomy/{TAXONOMY_VERSION}/options",
    )


@app.get("/taxonomy/{version}/options", response_model=TaxonomyOptionsResponse)
def taxonomy_options(
    version: str,
    response: Response,
    level: int | None = Query(default=None),
) -> TaxonomyOptionsResponse:
    if level is not None and level not in (1, 2, 3, 4):
        raise HTTPException(status_code=400, detail=f"invalid level: {level}")

    try:
        options = _load_taxonomy_options(version)
    except TaxonomyError as exc:
        raise HTTPException(status_code=404, detail=f"taxonomy version not found: {version}") from exc

    if level is not None:
        options = [item for item in options if item.level == level]

    response.headers["Cache-Control"] = "public, max-age=86400"
    return TaxonomyOptionsResponse(
        version=version,
        level=level,
        total=len(options),
        options=options,
    )


@app.post("/match", response_model=MatchResponse)
def match(body: MatchRequest) -> MatchResponse:
    if len(body.roasterNotes) > MAX_NOTES_CHARS:
        raise HTTPException(status_code=413, detail="roasterNotes too long")

    try:
        engine = _load_engine(TAXONOMY_VERSION)
        score = engine.calculate_match_score(body.roasterNotes, body.selectedFlavors, body.sensoryAttributes)
        details = None
        if body.includeDetails:
            details = _details_response(
                engine.get_match_details(body.roasterNotes, body.selectedFlavors, body.sensoryAttributes)
            )
        return MatchResponse(
            total=score.total,
            flavorScore=score.flavor_score,
            sensoryScore=score.sensory_score,
            highMatch=score.is_high_match(engine.config.high_match_threshold),
            details=details,
            warnings=engine.taxonomy.invalid_selections(body.selectedFlavors),
        )
    except TaxonomyError as exc:
        logger.exception("taxonomy unavailable")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
