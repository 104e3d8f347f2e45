"""Link legacy interviews to job seeker accounts in bulk.

Runs the same lookup cascade the dashboard uses for every job seeker profile
and writes the missing ``user_id`` links it discovers.

Usage:
  python scripts/backfill_interview_links.py            # write links
  python scripts/backfill_interview_links.py --dry-run  # report only
"""

import argparse
import sys
import os

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from hireboard import create_app
from hireboard.models.profile import Profile, Role
from hireboard.services.linker import SqlLinkStore, apply_backfills, plan_links


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--dry-run', action='store_true', help='report backfills without writing them')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        store = SqlLinkStore()
        planned = applied = 0
        for profile in Profile.query.filter_by(role=Role.JOB_SEEKER.value).all():
            email = profile.user.email if profile.user else None
            result = plan_links(profile.id, email, store,
                                fallback_limit=app.config.get('LINKER_FALLBACK_LIMIT', 100),
                                fuzzy=app.config.get('LINKER_FUZZY_FALLBACK', True))
            if not result.backfills:
                continue
            planned += len(result.backfills)
            app.logger.info('%s: %d backfills via %s', profile.id, len(result.backfills), result.strategy)
            if not args.dry_run:
                applied += apply_backfills(result.backfills, store)
        app.logger.info('planned=%d applied=%d dry_run=%s', planned, applied, args.dry_run)
    return 0


if __name__ == '__main__':
    sys.exit(main())
