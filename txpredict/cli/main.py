import typer
import requests
import os

from txpredict.core.errors import PredictorError, ProviderError
from txpredict.provider import fetch_sessions
from txpredict.services import predict_next


app = typer.Typer()
BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")
API_KEY = os.getenv("API_KEY")


def _headers():
    h = {}
    if API_KEY:
        h["X-API-Key"] = API_KEY
    return h


def _get(path: str, **params):
    r = requests.get(f"{BASE}{path}", params=params or None, headers=_headers())
    typer.echo(r.json())


@app.command()
def predict(local: bool = typer.Option(False, help="Fetch and predict in-process, no server.")):
    if local:
        try:
            typer.echo(predict_next(fetch_sessions()))
        except (ProviderError, PredictorError) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(1)
        return
    _get("/predict")


@app.command()
def stats():
    _get("/stats")


@app.command()
def patterns(min_k: int = 3):
    _get("/patterns", min_k=min_k)


@app.command()
def history(limit: int = 50):
    _get("/history", limit=limit)


@app.command()
def summary():
    _get("/summary")


@app.command()
def serve(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("txpredict.api.main:app", host=host, port=port)


if __name__ == "__main__":
    app()
