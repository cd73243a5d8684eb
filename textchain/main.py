import logging
import threading
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from textchain import config
from textchain.markov_model import (
    MarkovModel,
    PossibilityNotFoundError,
    UntrainedModelError,
)

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="textchain")

# Load Markov model on the seed corpus
markov = MarkovModel(seed=config.SEED)
markov.add_state(config.SEED_CORPUS)
markov.train(config.ORDER)

# train() rebuilds the tables in place; sync endpoints run in a thread pool
model_lock = threading.Lock()


class StatesRequest(BaseModel):
    states: Union[str, List[str]]


class OrderRequest(BaseModel):
    order: Any = config.DEFAULT_ORDER


class TrainRequest(BaseModel):
    order: Any = None


class GenerateRequest(BaseModel):
    length: int = config.DEFAULT_LENGTH


def _snapshot(possibilities) -> Dict[str, List[str]]:
    return {gram: list(chars) for gram, chars in possibilities.items()}


@app.post("/states")
def add_states(req: StatesRequest):
    with model_lock:
        markov.add_state(req.states)
        return {"states": list(markov.get_states())}


@app.get("/states")
def get_states():
    with model_lock:
        return {"states": list(markov.get_states())}


@app.delete("/model")
def clear_model():
    with model_lock:
        markov.clear()
        return {"states": [], "order": markov.get_order()}


@app.get("/order")
def get_order():
    with model_lock:
        return {"order": markov.get_order()}


@app.put("/order")
def set_order(req: OrderRequest):
    with model_lock:
        setting = markov.set_order(req.order)
    return {"order": setting.order, "warning": setting.warning}


@app.get("/possibilities")
def get_possibilities():
    with model_lock:
        return {"possibilities": _snapshot(markov.get_possibility())}


@app.get("/possibilities/{gram}")
def get_possibility(gram: str):
    with model_lock:
        try:
            continuations = markov.get_possibility(gram)
        except PossibilityNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
    return {"gram": gram, "continuations": list(continuations)}


@app.delete("/possibilities")
def clear_possibilities():
    with model_lock:
        markov.clear_possibilities()
        return {"possibilities": {}}


@app.post("/train")
def train(req: TrainRequest):
    warning: Optional[str] = None
    with model_lock:
        if req.order is not None:
            warning = markov.set_order(req.order).warning
        markov.train()
        return {
            "order": markov.get_order(),
            "warning": warning,
            "start": list(markov.start),
            "grams": len(markov.possibilities),
        }


@app.post("/generate")
def generate_text(req: GenerateRequest):
    with model_lock:
        try:
            text = markov.generate(req.length)
        except UntrainedModelError as e:
            raise HTTPException(status_code=409, detail=str(e))
    return {"generated_text": text}


@app.get("/grams/random")
def random_gram():
    with model_lock:
        return {"gram": markov.random_gram()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
