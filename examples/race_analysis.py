"""Multi-endpoint race analysis example."""

from jolpica import Filters, JolpicaClient, PitStopFilters


def analyze_race(season: int, round: int) -> None:
    """Analyze a single race: results, pit stops and qualifying."""
    with JolpicaClient() as jolpica:
        # 1. Race results
        races = jolpica.get_race_results(Filters(season=season, round=round))
        if not races:
            print(f"No results yet for {season} round {round}")
            return
        race = races[0]
        print(f"Race: {race.race_name}")
        print(f"Circuit: {race.circuit.circuit_name}, {race.circuit.location.country}")
        print()

        results = race.payload.results
        print("=== Race Results ===")
        for r in results:
            if r.time is None:
                gap = r.status
            elif r.position == 1:
                gap = "WINNER"
            else:
                gap = f"+{r.time.delta.total_seconds():.3f}s"
            print(f"  P{r.position}: {r.driver.full_name} [{r.constructor.name}] {gap}")

        fastest = [r for r in results if r.fastest_lap is not None and r.fastest_lap.rank == 1]
        if fastest:
            lap = fastest[0].fastest_lap
            print(f"\nFastest lap: {fastest[0].driver.full_name}, lap {lap.lap} in {lap.time}")

        # 2. Pit stop analysis
        pits = jolpica.get_pit_stops(PitStopFilters(season=season, round=round))
        print(f"\n=== Pit Stops ({len(pits)} total) ===")
        driver_pits: dict[str, list[float]] = {}
        for p in pits:
            driver_pits.setdefault(p.driver_id, []).append(p.duration.total_seconds())
        for driver_id, durations in sorted(driver_pits.items()):
            stops = ", ".join(f"{d:.1f}s" for d in durations)
            print(f"  {driver_id}: {len(durations)} stop(s) - [{stops}]")

        # 3. Grid vs finish for the top 3
        print("\n=== Qualifying vs Finish (top 3) ===")
        qualifying = jolpica.get_qualifying_results(Filters(season=season, round=round))
        grid = {q.driver.driver_id: q.position for q in qualifying[0].payload.results} if qualifying else {}
        for r in results[:3]:
            quali = grid.get(r.driver.driver_id)
            print(f"  {r.driver.full_name}: qualified P{quali or '?'}, started P{r.grid}, finished P{r.position}")


if __name__ == "__main__":
    analyze_race(2023, 4)
