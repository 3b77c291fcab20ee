"""Fewest-stop journeys across a metro network, with a command-line front end."""

from __future__ import annotations

import argparse
import sys
import urllib.request
from collections.abc import Iterable, Sequence
from pathlib import Path

from workbench.network import NO_ROUTE, LineManager, Route, StationManager, parse_stations

DEFAULT_BIAS = 30
FETCH_TIMEOUT = 30.0
_UNREACHED = sys.maxsize


def build_route_matrix(
    station_manager: StationManager, line_manager: LineManager
) -> tuple[list[str], list[list[Route]]]:
    """Return station names and the best direct route between every pair.

    Pairs with no shared line, and each station with itself, hold a
    route of ``NO_ROUTE`` stops.
    """
    stations = station_manager.stations()
    names = [station.name for station in stations]
    matrix: list[list[Route]] = []
    for origin in stations:
        row: list[Route] = []
        for destination in stations:
            if origin is destination:
                row.append(Route())
            else:
                shared = station_manager.common_lines(origin, destination)
                row.append(line_manager.get_best_route(origin.name, destination.name, shared))
        matrix.append(row)
    return names, matrix


def shortest_route(
    station_manager: StationManager,
    line_manager: LineManager,
    start: str,
    terminal: str,
    bias: int = DEFAULT_BIAS,
) -> list[Route]:
    """Return the rides from ``start`` to ``terminal`` with fewest stops.

    Every change of line costs ``bias`` extra stops. The result is empty
    when the two stations are the same or cannot be joined.
    """
    names, matrix = build_route_matrix(station_manager, line_manager)
    index = {name: position for position, name in enumerate(names)}
    for name in (start, terminal):
        if name not in index:
            raise KeyError(f"Station not found: {name}")
    source = index[start]
    size = len(names)

    distance = [route.stops for route in matrix[source]]
    paths = [[route] for route in matrix[source]]
    visited = [False] * size
    visited[source] = True

    for _ in range(size - 1):
        nearest = 0
        best = _UNREACHED
        for candidate, dist in enumerate(distance):
            if not visited[candidate] and dist < best:
                best = dist
                nearest = candidate
        visited[nearest] = True

        penalty = bias if distance[nearest] != 0 else 0
        for target, route in enumerate(matrix[nearest]):
            new_distance = distance[nearest] + route.stops + penalty
            if not visited[target] and distance[target] > new_distance:
                path = list(paths[nearest])
                if route.stops != NO_ROUTE:
                    path.append(route)
                distance[target] = new_distance
                paths[target] = path

    return [route for route in paths[index[terminal]] if route.stops != NO_ROUTE]


def format_route(line_manager: LineManager, routes: Iterable[Route]) -> str:
    """Describe each ride and the stations it passes, one ride per two lines."""
    lines: list[str] = []
    for route in routes:
        if route.stops == NO_ROUTE:
            continue
        lines.append(
            f"在 {route.from_stop} 乘坐 {route.line_number} 号线 到 "
            f"{route.to_stop} ( {route.stops} 站) "
        )
        passed = line_manager.stops_between(route.line_number, route.from_stop, route.to_stop)
        lines.append(" -> ".join(passed))
    return "\n".join(lines)


def fetch_stations(url: str) -> str:
    """Download the station list at ``url`` and return it as text."""
    with urllib.request.urlopen(url, timeout=FETCH_TIMEOUT) as response:
        return response.read().decode("utf-8")


def _load(source: str) -> str:
    if "://" in source:
        return fetch_stations(source)
    return Path(source).read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Plan a journey between two stations of a network read from a file or URL."""
    parser = argparse.ArgumentParser(
        prog="workbench-planner",
        description="Find the journey with fewest stops between two metro stations.",
    )
    parser.add_argument("source", help="path or URL of the JSON station list")
    parser.add_argument("--from", dest="start", help="starting station")
    parser.add_argument("--to", dest="terminal", help="destination station")
    parser.add_argument("--bias", type=int, default=DEFAULT_BIAS, help="stop cost of a change")
    args = parser.parse_args(argv)

    print("开始获取地铁数据...")
    try:
        station_manager, line_manager = parse_stations(_load(args.source))
    except (OSError, ValueError, KeyError) as error:
        print(f"cannot load station data: {error}", file=sys.stderr)
        return 1

    start = args.start
    if start is None:
        print("起始站")
        start = input().strip()
    terminal = args.terminal
    if terminal is None:
        print("终点站")
        terminal = input().strip()

    print("通过 Dijkstra 统计最短路线")
    try:
        routes = shortest_route(station_manager, line_manager, start, terminal, args.bias)
    except KeyError as error:
        print(error.args[0], file=sys.stderr)
        return 1

    print("打印解决方案")
    text = format_route(line_manager, routes)
    if text:
        print(text)
    return 0