"""Push command."""

from __future__ import annotations

import argparse

from storypush import BatchResult, PushConfig
from storypush.cli.common import format_count
from storypush.cli.progress.rich import RichPushProgress


def format_push_summary(result: BatchResult, config: PushConfig) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    epic_keys = {success.epic.key for success in result.successes}
    lines = [
        "",
        f"storypush - push complete ({mode})",
        "",
        f"  Jira:      {config.api_base}",
        f"  Project:   {config.project_key}",
        "",
        f"  Created:   {format_count(result.created, 'story', 'stories')} "
        f"across {format_count(len(epic_keys), 'epic', 'epics')}",
    ]
    if result.failed:
        lines.append(f"  Failed:    {format_count(result.failed, 'story', 'stories')}")

    if result.successes:
        lines.append("")
        for success in result.successes:
            lines.append(f"  {success.issue.key:<10}  {success.story.title}  (epic {success.epic.key})")

    if result.failures:
        lines.append("")
        for failure in result.failures:
            status = f" [HTTP {failure.status_code}]" if failure.status_code is not None else ""
            lines.append(f"  FAILED      {failure.story.title}{status}: {failure.error}")

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


async def run_push(args: argparse.Namespace) -> BatchResult:
    import storypush.cli as cli

    config = cli.load_config(args.config)
    stories = cli.load_stories(args.stories)

    if not args.verbose:
        with RichPushProgress() as progress:
            sp = await cli.StoryPush.from_config(config, progress=progress)
            result = await sp.push(stories, dry_run=args.dry_run)
    else:
        sp = await cli.StoryPush.from_config(config)
        result = await sp.push(stories, dry_run=args.dry_run)

    print(format_push_summary(result, config))
    return result


__all__ = ["format_push_summary", "run_push"]
