"""Basic usage examples for the jolpica client."""

from jolpica import Filters, JolpicaClient


def main() -> None:
    with JolpicaClient() as jolpica:
        # Get the 2023 race calendar
        print("=== 2023 Calendar ===")
        races = jolpica.get_race_schedules(Filters(season=2023))
        for race in races[:5]:
            location = race.circuit.location
            print(f"  R{race.round} {race.race_name} - {location.locality}, {location.country}")

        if not races:
            print("  No races found.")
            return

        # Session times for the first weekend
        first = races[0]
        print(f"\n=== Sessions for {first.race_name} ===")
        schedule = first.payload
        for label, session in [
            ("FP1", schedule.first_practice),
            ("Qualifying", schedule.qualifying),
            ("Sprint", schedule.sprint),
        ]:
            if session is not None:
                print(f"  {label}: {session.date} {session.time or ''}")
        print(f"  Race: {first.date} {first.time or ''}")

        # Drivers who took part in that race
        print(f"\n=== Drivers in {first.race_name} ===")
        drivers = jolpica.get_drivers(Filters(season=first.season, round=first.round))
        for driver in sorted(drivers, key=lambda d: d.permanent_number or 0):
            print(f"  #{driver.permanent_number} {driver.full_name} ({driver.nationality})")

        # First five laps of the first driver
        if drivers:
            driver = drivers[0]
            print(f"\n=== Laps 1-5 for {driver.full_name} ===")
            laps = jolpica.get_driver_laps(first.season, first.round, driver.driver_id)
            for lap in laps[:5]:
                print(f"  Lap {lap.number}: P{lap.position} {lap.time.total_seconds():.3f}s")


if __name__ == "__main__":
    main()
