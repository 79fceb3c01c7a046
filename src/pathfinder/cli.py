"""
Command-line front end.

Usage:
    pathfinder --map USA.txt shortest Seattle Miami
    pathfinder --map MiddleEarth.txt forest
    pathfinder --config session.json nodes
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from pathfinder.app.build import Session, build
from pathfinder.config.models import MapModel, SessionModel
from pathfinder.domain.entities.graph import Edge
from pathfinder.domain.errors import GraphError


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathfinder", description="Shortest paths and spanning forests over map files."
    )
    p.add_argument("--config", type=Path, help="JSON session config")
    p.add_argument("--map", dest="map_file", help="map description file")
    p.add_argument(
        "--format",
        dest="fmt",
        choices=["standard", "columnar", "auto"],
        default=None,
        help="connection line layout (default: auto)",
    )
    p.add_argument("--quiet", action="store_true", help="no JSON log lines")

    sub = p.add_subparsers(dest="command", required=True)
    sp = sub.add_parser("shortest", help="least-cost route between two nodes")
    sp.add_argument("start")
    sp.add_argument("finish")
    sub.add_parser("forest", help="minimum spanning forest of the whole map")
    sub.add_parser("nodes", help="list the nodes of the map")
    return p


def _load_config(args: argparse.Namespace) -> SessionModel:
    raw = json.loads(args.config.read_text(encoding="utf-8")) if args.config else {}
    model = SessionModel.model_validate(raw)
    if args.map_file:
        model.map = MapModel(file=args.map_file, fmt=args.fmt or "auto")
    elif args.fmt and model.map is not None:
        model.map = model.map.model_copy(update={"fmt": args.fmt})
    # stdout carries the command's results
    model.log = model.log.model_copy(update={"stream": "stderr"})
    return model


def _fmt_edge(e: Edge) -> str:
    return f"{e.origin} -> {e.destination} ({e.cost:g})"


def _run(session: Session, args: argparse.Namespace, out) -> None:
    if args.command == "shortest":
        path = session.shortest_path(args.start, args.finish)
        if path.is_empty() and args.start != args.finish:
            print(f"No route from {args.start} to {args.finish}", file=out)
            return
        for e in path:
            print(_fmt_edge(e), file=out)
        print(f"total: {path.total_cost:g}", file=out)
    elif args.command == "forest":
        forest = session.spanning_forest()
        for e in forest:
            print(_fmt_edge(e), file=out)
        print(f"total: {sum(e.cost for e in forest):g}", file=out)
    elif args.command == "nodes":
        for n in session.store.all_nodes():
            print(f"{n.id} {n.loc.x:g} {n.loc.y:g}", file=out)


def main(argv: list[str] | None = None, out=None) -> int:
    out = out or sys.stdout
    args = _parser().parse_args(argv)
    try:
        model = _load_config(args)
        if model.map is None:
            print("Please select a map (--map or config 'map').", file=sys.stderr)
            return 2
        session = build(model, use_logging=not args.quiet)
        _run(session, args, out)
    except (GraphError, OSError, ValidationError, json.JSONDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
