"""Print where resources would be copied for each profile, with a log of the decision."""

from __future__ import annotations

import sys

from omnicopy import EnvironmentSnapshot, StructuredLogger, resolve_output_layout


def main() -> None:
    env = EnvironmentSnapshot.capture()
    logger = StructuredLogger()
    for profile in sys.argv[1:] or ["debug", "release"]:
        layout = resolve_output_layout(profile, env, match="substring", logger=logger)
        print(f"{profile}: {layout.path} ({layout.kind})")
    logger.to_json_lines("omnicopy-layout.jsonl")


if __name__ == "__main__":
    main()
