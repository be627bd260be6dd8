import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Dict, Literal
from uuid import uuid4

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pentago.game import Game
from pentago.render import to_state
from pentago.rotation import CLOCKWISE, COUNTER_CLOCKWISE

logging.basicConfig(
    level=os.getenv("PENTAGO_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@dataclass
class Session:
    game: Game = field(default_factory=Game)
    lock: threading.Lock = field(default_factory=threading.Lock)


SESSIONS: Dict[str, Session] = {}


class PlaceRequest(BaseModel):
    quadrant: int = Field(ge=0, le=3)
    row: int = Field(ge=0, le=2)
    col: int = Field(ge=0, le=2)


class RotateRequest(BaseModel):
    quadrant: int = Field(ge=0, le=3)
    direction: Literal["CW", "CCW"]


DMAP_STR_TO_TURNS = {"CW": CLOCKWISE, "CCW": COUNTER_CLOCKWISE}


def get_session(gid: str) -> Session:
    s = SESSIONS.get(gid)
    if s is None:
        raise HTTPException(404, "unknown game")
    return s


@app.post("/new")
def new_game():
    gid = uuid4().hex
    s = Session()
    SESSIONS[gid] = s
    logger.info("Game created: %s", gid)
    return {"game_id": gid, "state": to_state(s.game.get_state())}


@app.get("/state/{gid}")
def state(gid: str):
    s = get_session(gid)
    return {"state": to_state(s.game.get_state())}


@app.post("/place/{gid}")
def place(gid: str, req: PlaceRequest):
    s = get_session(gid)
    with s.lock:
        before = s.game.get_state()
        after = s.game.place(req.quadrant, req.row, req.col)
    return {"state": to_state(after), "accepted": after is not before}


@app.post("/rotate/{gid}")
def rotate(gid: str, req: RotateRequest):
    s = get_session(gid)
    with s.lock:
        before = s.game.get_state()
        after = s.game.rotate(req.quadrant, DMAP_STR_TO_TURNS[req.direction])
    return {"state": to_state(after), "accepted": after is not before}


@app.post("/reset/{gid}")
def reset(gid: str):
    s = get_session(gid)
    with s.lock:
        after = s.game.reset()
    logger.info("Game reset: %s", gid)
    return {"state": to_state(after)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("PENTAGO_HOST", "127.0.0.1"),
        port=int(os.getenv("PENTAGO_PORT", "8000")),
    )
