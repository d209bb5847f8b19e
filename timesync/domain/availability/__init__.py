"""
Availability Domain - multi-group meeting time matching

Given several groups, each a roster of users with availability intervals,
find the time windows where every group has at least its minimum number of
members free, ranked by start time.

PIPELINE:
```
collector.py   IntervalCollector      roster + intervals per group, one fetch per schedule
boundaries.py  extract_candidate_windows   atomic windows between interval endpoints
coverage.py    evaluate_windows       per-group covering users, reject below minimum
ranking.py     rank_matches           sort by (start, end), truncate to count
engine.py      AvailabilityMatcher    validation + the pipeline above
```

SUPPORTING FILES:
- models.py      Immutable value types (Interval, GroupAvailability, MatchResult, ...)
- repository.py  SqlAvailabilitySource, the SQLAlchemy-backed data source
- schemas.py     API response models
- router.py      GET /api/availability/match

POLICIES:
- Members without a linked schedule are skipped, not reported as errors.
  They still appear in `roster_size` but never in `group_size`.
- Coverage requires full containment of the window, partial overlap is not enough.
- Recurring slots are used as stored; nothing is expanded here.
- Nothing is cached between requests.
"""
