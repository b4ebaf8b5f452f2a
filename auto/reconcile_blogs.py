#!/usr/bin/env python3
"""
Reconcile Blog Back-References Script.

Rebuilds every user's list of owned blog ids from the blogs' ``user_id``
column. Run it after a crash between the two writes of a blog create or
delete, or whenever the lists are suspected to have drifted.

Usage:
    uv run python auto/reconcile_blogs.py
    uv run python auto/reconcile_blogs.py --dry-run
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from bloglist.db import close_db, transaction  # noqa: E402
from bloglist.repositories import BlogRepository, UserRepository  # noqa: E402
from bloglist.services import BlogService, ReconciliationReport  # noqa: E402


def display_report(report: ReconciliationReport, *, dry_run: bool) -> None:
    """
    Print the outcome of a reconciliation run.

    Parameters
    ----------
    report : ReconciliationReport
        Result returned by the service.
    dry_run : bool
        Whether the changes were rolled back.
    """
    print("=" * 60)
    print("Blog Back-Reference Reconciliation" + (" (dry run)" if dry_run else ""))
    print("=" * 60)
    print(f"Users checked:  {report.users_checked}")
    print(f"Users repaired: {report.repaired}")
    for user_id in report.users_repaired:
        print(f"  - {user_id}")
    if report.orphaned_blogs:
        print(f"Blogs with a missing owner: {len(report.orphaned_blogs)}")
        for blog_id in report.orphaned_blogs:
            print(f"  - {blog_id}")
    print("-" * 60)
    if dry_run and report.repaired:
        print("⚠️  No changes were saved. Run without --dry-run to apply them.")
    else:
        print("✅ Done.")


async def reconcile(*, dry_run: bool) -> ReconciliationReport:
    """
    Run the reconciliation in a single transaction.

    Parameters
    ----------
    dry_run : bool
        Roll back instead of committing.

    Returns
    -------
    ReconciliationReport
        What was checked and repaired.
    """
    try:
        async with transaction(dry_run=dry_run) as session:
            service = BlogService(BlogRepository(session), UserRepository(session))
            return await service.reconcile_back_references()
    finally:
        await close_db()


def parse_args() -> Namespace:
    """
    Parse command line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = ArgumentParser(
        description="Rebuild users' owned-blog lists from the blogs table.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report what would change
  uv run python auto/reconcile_blogs.py --dry-run

  # Apply the repairs
  uv run python auto/reconcile_blogs.py
        """,
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Compute the repairs but roll them back",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    try:
        report = asyncio_run(reconcile(dry_run=args.dry_run))
    except KeyboardInterrupt:
        print("\n\n❌ Cancelled by user.")
        return 1
    display_report(report, dry_run=args.dry_run)
    return 0


if __name__ == "__main__":
    sys_exit(main())
