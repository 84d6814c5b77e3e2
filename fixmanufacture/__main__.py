"""
Lancement du serveur: python -m fixmanufacture [--port N] [--reload]
Les valeurs par défaut viennent de fixmanufacture.config (HOST, PORT, LOG_LEVEL, UVICORN_RELOAD).
"""
from typing import List, Optional
import argparse
import logging

import uvicorn

from fixmanufacture import config


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fixmanufacture")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    parser.add_argument("--reload", action="store_true", default=config.UVICORN_RELOAD)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    # import string requis par uvicorn pour le reload
    uvicorn.run("fixmanufacture.asgi:app", host=args.host, port=args.port, reload=args.reload, log_level=args.log_level)


if __name__ == "__main__":
    main()
