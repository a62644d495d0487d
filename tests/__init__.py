"""ROSTER test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every UserRepository implementation must share.
- integration/  : Real interactions with a database (SQLite file, Postgres).
- e2e/          : The installed CLI driven through click's CliRunner.
- fixtures/     : Shared engine fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer the in-memory repository over mocks.
- Contract parametrizes implementations to ensure consistent behavior.
- Postgres-backed tests are skipped when Docker is unavailable.
"""
