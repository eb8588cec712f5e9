"""Shared puzzle fixtures for the test suite."""

# A known solvable puzzle with a unique solution
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# (0, 0) accepts 1 or 2, but column 1 already holds both, so (0, 1) is
# left without a candidate either way.
DEAD_END_PUZZLE = (
    "003456789"
    "000000000"
    "000000000"
    "000000000"
    "010000000"
    "020000000"
    "000000000"
    "000000000"
    "000000000"
)

# (0, 8) is the first empty cell and 9 sits below it in the same column.
NO_CANDIDATE_PUZZLE = (
    "123456780"
    "000000009"
    + "0" * 63
)
