from __future__ import annotations

import json
from typing import Any, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import AnalysisSummary
from domain.enums import Region
from infrastructure import MatchRepository, RiotAPIClient
from application.session import AnalysisSession, CallbackEventSink

_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RED = "\033[91m"
_RESET = "\033[0m"


class AnalyzeCommand:
    """Runs one analysis in the terminal, rendering the session's events."""

    def __init__(self, puuid: str, region: Region, *, as_json: bool = False) -> None:
        self.puuid = puuid
        self.region = region
        self.as_json = as_json
        self._log = get_logger(__name__, service="analyze-cli")

    @staticmethod
    def _progress_bar(processed: int, total: int, width: int = 30) -> str:
        filled = int(width * processed / total) if total else width
        bar = "█" * filled + "-" * (width - filled)
        return f"{_CYAN}Matches{_RESET} | {bar} | {processed}/{total}"

    async def _render(self, event: dict[str, Any]) -> None:
        kind = event["type"]
        if kind == "progress":
            end = "\n" if event["processed"] >= event["total"] else ""
            print(f"\r{self._progress_bar(event['processed'], event['total'])}", end=end, flush=True)
        elif kind == "status":
            print(f"\n{_YELLOW}{event['message']}{_RESET}")
        elif kind == "error":
            print(f"\n{_RED}{event['message']}{_RESET}")
        elif kind == "complete" and self.as_json:
            print(json.dumps(event["data"], indent=2))

    @staticmethod
    def _print_summary(summary: AnalysisSummary) -> None:
        print(f"\n{_GREEN}{'═' * 48}{_RESET}")
        print(f"  Record:      {summary.wins}W / {summary.losses}L")
        print(f"  KDA:         {summary.total_kda}")
        print(f"  Main role:   {summary.most_common_role}")
        print(f"  Persona:     {summary.player_persona}")
        k = summary.kills
        print(f"  Multi-kills: {k.penta_kills} penta, {k.quadra_kills} quadra, "
              f"{k.triple_kills} triple, {k.double_kills} double")
        print(f"  Time dead:   {summary.total_time_dead}s")
        mk = summary.most_kills_game
        if mk.kills >= 0:
            print(f"  Most kills:  {mk.champion_name} {mk.kills}/{mk.deaths}/{mk.assists}")
        if summary.best_kda_game:
            b = summary.best_kda_game
            print(f"  Best KD:     {b.champion_name} {b.kills}/{b.deaths}/{b.assists} ({b.kd:.2f})")
        if summary.best_duo:
            d = summary.best_duo
            print(f"  Best duo:    {d.puuid[:12]}… {d.win_rate:.0f}% over {d.games} games")
        print(f"{_GREEN}{'═' * 48}{_RESET}")

    async def run(self, match_ids: Optional[list[str]] = None) -> int:
        settings.validate()
        async with RiotAPIClient(settings.RIOT_API_KEY) as client:
            session = AnalysisSession(MatchRepository(client), CallbackEventSink(self._render))
            self._log.info(f"Starting analysis {session.session_id} on {self.region.value}")
            if match_ids is None:
                summary = await session.run_for_player(self.puuid, self.region)
            else:
                summary = await session.run(match_ids, self.puuid, self.region)

        if summary is None:
            return 1
        if not self.as_json:
            self._print_summary(summary)
        return 0
