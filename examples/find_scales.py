#!/usr/bin/env python3
"""
Example: Identify, save and export scales.

This walks through a scale finder session: matching notes, saving
them under song names, browsing the library, and exporting it.

Usage:
    python examples/find_scales.py
    # Creates: examples/output/saved_scales.csv
"""

from pathlib import Path

from chuk_mcp_scales.export import write_csv
from chuk_mcp_scales.library import ScaleFinderSession


def main() -> None:
    """Run a short scale finder session."""
    output_dir = Path(__file__).parent / "output"
    session = ScaleFinderSession()

    songs = {
        "So What": ["D", "E", "F", "G", "A", "B", "C"],
        "Greensleeves": ["A", "B", "C", "D", "E", "F", "G"],
        "Let It Be": ["C", "D", "E", "F", "G", "A", "B"],
        "Mystery": ["C", "C#", "E", "F", "G", "A", "B"],
    }

    print("Matching scales...")
    for song, notes in songs.items():
        session.set_notes(notes)
        match = session.find_scale()
        session.set_song_name(song)
        session.save()
        print(f"  {song:<14} {' '.join(notes):<22} -> {', '.join(match.labels)}")

    print("\nScale types seen:", ", ".join(session.scale_types()))

    session.set_filter("Minor")
    print("\nSongs in a minor scale:")
    for record in session.visible_records():
        print(f"  {record.song_name}")

    csv_path = write_csv(session.store.records, output_dir)
    print(f"\nCreated: {csv_path}")


if __name__ == "__main__":
    main()
