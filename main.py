# main.py

from argparse import ArgumentParser, Namespace
from pathlib import Path
from shutil import which
from subprocess import run

from bloglist.configs import settings


def parse_args() -> Namespace:
    parser = ArgumentParser(description="Run the Bloglist API development server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto reload")
    return parser.parse_args()


def uvicorn_executable() -> str:
    """Prefer the project's virtualenv, then whatever is on PATH."""
    venv_uvicorn = Path(__file__).resolve().parent / ".venv" / "bin" / "uvicorn"
    if venv_uvicorn.exists():
        return str(venv_uvicorn)
    return which("uvicorn") or "uvicorn"


def main() -> None:
    args = parse_args()
    cmmd = [
        uvicorn_executable(),
        "bloglist:app",
        "--host",
        args.host,
        "--port",
        str(args.port),
        "--log-level",
        settings.LOG_LEVEL.lower(),
        "--loop",
        "uvloop",
        "--http",
        "httptools",
    ]
    if not args.no_reload:
        cmmd.append("--reload")
    run(cmmd, check=True)


if __name__ == "__main__":
    main()
