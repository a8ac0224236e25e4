#!/usr/bin/env python3
"""Main entry point for the mentor matching demo"""
from pathlib import Path
from rich.console import Console
from rich.table import Table

from mentormatch.matching import MatchingEngine, load_profiles
from mentormatch.utils import logger, config

console = Console()

SAMPLE_PROFILES = Path(__file__).parent / "data" / "sample_profiles.json"


def display_matches(user_id: str, matches, counterpart: str = "Mentor"):
    """Display matches in a table"""
    table = Table(title=f"Matches for {user_id}")
    table.add_column("Rank", style="cyan", width=6)
    table.add_column(counterpart, style="magenta")
    table.add_column("Label", style="green")
    table.add_column("Match Score", style="yellow", width=12)
    table.add_column("Confidence", style="blue", width=12)
    table.add_column("Why", style="white")

    for i, match in enumerate(matches, 1):
        table.add_row(
            str(i),
            match.mentor_id if counterpart == "Mentor" else match.mentee_id,
            match.label,
            f"{match.overall_score:.2f}",
            f"{match.confidence:.2f}",
            "\n".join(match.reasoning)
        )

    console.print(table)


def main():
    """Main workflow"""
    console.print("[bold blue]Mentor Matching Engine[/bold blue]\n")

    logger.info("Initializing matching engine")
    engine = MatchingEngine.from_config(config)

    profiles = load_profiles(SAMPLE_PROFILES)
    mentee = next(p for p in profiles if p.role == "mentee")
    console.print(f"[cyan]Loaded {len(profiles)} profiles from {SAMPLE_PROFILES.name}[/cyan]")

    # Shared history makes mentor-1 a collaborative pick for the mentee
    engine.update_user_interactions(mentee.id, [{"targetId": "post-42", "type": "like"}])
    engine.update_user_interactions("mentor-1", [{"targetId": "post-42", "type": "comment"}])

    console.print(f"\n[cyan]Instant suggestions for {mentee.id}...[/cyan]")
    display_matches(mentee.id, engine.get_instant_matches(mentee, profiles))

    console.print(f"\n[cyan]Full matching for {mentee.id}...[/cyan]")
    display_matches(mentee.id, engine.find_enhanced_matches(mentee, profiles, config.default_limit))


if __name__ == "__main__":
    main()
