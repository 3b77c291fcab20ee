"""Stations, lines and single-line routes of a metro network."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

NO_ROUTE = 9999
"""Stop count that marks two stations with no direct line between them."""


@dataclass
class Station:
    """A named station and the lines that call at it."""

    name: str
    lines: set[str] = field(default_factory=set)

    def add_line(self, line: str) -> None:
        """Record that ``line`` calls at this station."""
        self.lines.add(line)


@dataclass
class Line:
    """A line and its stations in running order."""

    line_number: str
    stations: list[str] = field(default_factory=list)

    def add_station(self, name: str) -> None:
        """Append ``name`` to the end of the line."""
        self.stations.append(name)


@dataclass
class Route:
    """A ride between two stations on one line."""

    from_stop: str = ""
    to_stop: str = ""
    stops: int = NO_ROUTE
    line_number: str = ""


class StationManager:
    """All stations of the network, keyed by name."""

    def __init__(self) -> None:
        self._stations: dict[str, Station] = {}

    def add_station(self, name: str, line: str) -> None:
        """Register ``name`` as served by ``line``, creating the station if new."""
        station = self._stations.get(name)
        if station is None:
            station = self._stations[name] = Station(name)
        station.add_line(line)

    def get_station(self, name: str) -> Station | None:
        """Return the station called ``name``, or ``None`` if there is none."""
        return self._stations.get(name)

    def common_lines(self, origin: Station, destination: Station) -> list[str]:
        """Return the lines serving both stations, in sorted order."""
        return sorted(origin.lines & destination.lines)

    def describe(self, name: str) -> str:
        """Return a one-line summary of the station and its lines."""
        station = self._stations.get(name)
        if station is None:
            raise KeyError(f"Station not found: {name}")
        return f"Station: {name} -> line: {', '.join(sorted(station.lines))}"

    def stations(self) -> list[Station]:
        """Return every station, ordered by name."""
        return [self._stations[name] for name in sorted(self._stations)]

    def __iter__(self) -> Iterator[Station]:
        return iter(self.stations())

    def __len__(self) -> int:
        return len(self._stations)


def _positions(stations: list[str], origin: str, destination: str) -> tuple[int, int]:
    start = stop = -1
    for index, name in enumerate(stations):
        if name == origin:
            start = index
        elif name == destination:
            stop = index
    return start, stop


class LineManager:
    """All lines of the network, keyed by line number."""

    def __init__(self) -> None:
        self._lines: dict[str, Line] = {}

    def add_line(self, line_number: str, station_name: str) -> None:
        """Append ``station_name`` to ``line_number``, creating the line if new."""
        line = self._lines.get(line_number)
        if line is None:
            line = self._lines[line_number] = Line(line_number)
        line.add_station(station_name)

    def get_best_route(
        self, origin: str, destination: str, line_numbers: Iterable[str]
    ) -> Route:
        """Return the ride with fewest stops among ``line_numbers``.

        When no listed line serves both stations the route has
        ``NO_ROUTE`` stops and an empty line number.
        """
        best = Route(origin, destination)
        for number in line_numbers:
            line = self._lines.get(number)
            if line is None:
                continue
            start, stop = _positions(line.stations, origin, destination)
            if start != -1 and stop != -1:
                stops = abs(start - stop)
                if stops < best.stops:
                    best.stops = stops
                    best.line_number = number
        return best

    def stops_between(self, line_number: str, origin: str, destination: str) -> list[str]:
        """Return the stations passed riding ``line_number`` from origin to destination."""
        line = self._lines.get(line_number)
        if line is None:
            raise KeyError(f"Line not found: {line_number}")
        start, stop = _positions(line.stations, origin, destination)
        if start == -1 or stop == -1:
            raise ValueError(f"One or both stop not found on line {line_number}")
        ordered = line.stations if start <= stop else list(reversed(line.stations))
        passed: list[str] = []
        riding = False
        for name in ordered:
            if name == origin:
                passed.append(name)
                riding = True
            elif name == destination:
                passed.append(name)
                riding = False
            elif riding:
                passed.append(name)
        return passed

    def describe(self, line_number: str) -> str:
        """Return the line number and its stations in running order."""
        line = self._lines.get(line_number)
        if line is None:
            raise KeyError(f"Line not found: {line_number}")
        return f"Line: {line_number}\nLines: {' -> '.join(line.stations)}"

    def lines(self) -> list[Line]:
        """Return every line, ordered by line number as text."""
        return [self._lines[number] for number in sorted(self._lines)]

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines())

    def __len__(self) -> int:
        return len(self._lines)


def line_from_key(key: str) -> str:
    """Return the line number encoded in the first two characters of ``key``.

    A numeric prefix loses its leading zeros; any other prefix is kept as is.
    """
    prefix = key[:2]
    try:
        return str(int(prefix))
    except ValueError:
        return prefix


def build_network(
    records: Iterable[Mapping[str, Any]],
) -> tuple[StationManager, LineManager]:
    """Build the network from records holding a station ``key`` and ``value`` name."""
    station_manager = StationManager()
    line_manager = LineManager()
    for record in records:
        key = str(record["key"])
        name = str(record["value"])
        line = line_from_key(key)
        station_manager.add_station(name, line)
        line_manager.add_line(line, name)
    return station_manager, line_manager


def parse_stations(text: str) -> tuple[StationManager, LineManager]:
    """Build the network from a JSON array of ``{"key": ..., "value": ...}`` objects."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("station data must be a JSON array")
    for record in data:
        if not isinstance(record, dict):
            raise ValueError(f"station record must be an object, got {record!r}")
    return build_network(data)