from linkguard.checks.typosquat import find_similarity, levenshtein


def test_levenshtein_known_values() -> None:
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("flaw", "lawn") == 2
    assert levenshtein("github.com", "github.com") == 0


def test_levenshtein_empty_sides() -> None:
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("", "") == 0


def test_close_domain_is_suspicious() -> None:
    result = find_similarity("githib.com", ["github.com"])
    assert result.is_suspicious
    assert result.distance == 1
    assert result.matched_domain == "github.com"
    assert result.reason == "Подозрительно похоже на github.com (расстояние 1)."


def test_first_declared_domain_wins_on_tie() -> None:
    assert find_similarity("aple.com", ["apple.com", "ample.com"]).matched_domain == "apple.com"
    assert find_similarity("aple.com", ["ample.com", "apple.com"]).matched_domain == "ample.com"


def test_homoglyph_match_beyond_threshold() -> None:
    result = find_similarity("f\u00e1c\u00e9b\u00f3\u00f3k.c\u00f3m", ["facebook.com"])
    assert result.is_suspicious
    assert result.distance == 5
    assert result.reason == "Возможен омоглиф: выглядит как facebook.com."


def test_not_suspicious_reports_closest_within_ceiling() -> None:
    result = find_similarity("github.net", ["google.com", "github.com"])
    assert not result.is_suspicious
    assert result.distance == 3
    assert result.matched_domain == "github.com"
    assert result.reason is None


def test_distance_beyond_ceiling_is_absent() -> None:
    result = find_similarity("qwzxqwzxqwzxqwzxqwzx", ["github.com"])
    assert not result.is_suspicious
    assert result.distance is None
    assert result.matched_domain == "github.com"


def test_custom_thresholds() -> None:
    result = find_similarity("github.net", ["github.com"], distance_threshold=3)
    assert result.is_suspicious
    result = find_similarity("github.info", ["github.com"], max_distance=3)
    assert result.distance is None


def test_empty_trusted_set() -> None:
    result = find_similarity("github.com", [])
    assert not result.is_suspicious
    assert result.distance is None
    assert result.matched_domain is None


def test_very_long_candidate_is_truncated() -> None:
    result = find_similarity("a" * 5000, ["github.com"])
    assert not result.is_suspicious
    assert result.distance is None


def test_distance_at_threshold_is_suspicious() -> None:
    assert find_similarity("github.comxx", ["github.com"]).is_suspicious
    result = find_similarity("github.comxxx", ["github.com"])
    assert not result.is_suspicious
    assert result.distance == 3


def test_distance_at_ceiling_is_reported() -> None:
    assert find_similarity("github.comxxxxxx", ["github.com"]).distance == 6
    result = find_similarity("github.comxxxxxxx", ["github.com"])
    assert result.distance is None
    assert result.matched_domain == "github.com"
