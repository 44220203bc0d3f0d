"""Tests for multi-strategy file resolution."""

from blast_radius.config import ResolverConfig
from blast_radius.matching.resolver import (
    FileResolver,
    basename,
    find_by_levenshtein,
    get_suggestions,
    split_segments,
    stem,
)
from blast_radius.models import MatchType


class TestPathHelpers:
    def test_split_handles_both_separators(self):
        assert split_segments("src\\Services/PaymentService.cs") == [
            "src",
            "Services",
            "PaymentService.cs",
        ]

    def test_split_drops_empty_segments(self):
        assert split_segments("/src//a.cs") == ["src", "a.cs"]

    def test_basename_and_stem(self):
        assert basename("src/Services/PaymentService.cs") == "PaymentService.cs"
        assert stem("src/Services/PaymentService.cs") == "PaymentService"
        assert stem("") == ""


class TestStrategies:
    def test_exact(self, corpus):
        r = FileResolver(corpus).resolve("src/Services/PaymentService.cs")
        assert r.match_type is MatchType.EXACT
        assert r.exists
        assert r.resolved_path == "src/Services/PaymentService.cs"

    def test_case_insensitive(self, corpus):
        r = FileResolver(corpus).resolve("SRC/services/paymentservice.cs")
        assert r.match_type is MatchType.CASE_INSENSITIVE
        assert r.resolved_path == "src/Services/PaymentService.cs"

    def test_case_insensitive_wins_over_levenshtein(self, corpus):
        # Also within edit distance 0 of the basename; must stop at strategy 2
        r = FileResolver(corpus).resolve("src/services/PaymentService.cs")
        assert r.match_type is MatchType.CASE_INSENSITIVE
        assert r.distance is None

    def test_filename_only(self, corpus):
        r = FileResolver(corpus).resolve("Services/BillingService.cs")
        assert r.match_type is MatchType.FILENAME
        assert r.resolved_path == "src/Services/BillingService.cs"

    def test_ambiguous_filename_falls_to_partial_path(self, corpus):
        r = FileResolver(corpus).resolve("Models/Payment.cs")
        assert r.match_type is MatchType.PARTIAL_PATH
        assert r.resolved_path == "src/Models/Payment.cs"

    def test_partial_path_accepts_backslashes(self, corpus):
        r = FileResolver(corpus).resolve("Legacy\\Payment.cs")
        assert r.match_type is MatchType.PARTIAL_PATH
        assert r.resolved_path == "src/Legacy/Payment.cs"

    def test_levenshtein_typo(self, corpus):
        r = FileResolver(corpus).resolve("src/Services/PaymentSrvice.cs")
        assert r.match_type is MatchType.LEVENSHTEIN
        assert r.resolved_path == "src/Services/PaymentService.cs"
        assert r.distance == 1

    def test_unresolved_with_suggestions(self, corpus):
        r = FileResolver(corpus).resolve("Services/PaymentProcessorGatewayV2.cs")
        assert r.match_type is MatchType.UNRESOLVED
        assert not r.exists
        assert r.resolved_path is None
        # Six basenames contain "paym"; capped at five, corpus order
        assert r.suggestions == [
            "src/Controllers/PaymentController.cs",
            "src/Services/PaymentService.cs",
            "src/Repositories/PaymentRepository.cs",
            "src/Models/Payment.cs",
            "src/Legacy/Payment.cs",
        ]

    def test_unresolved_without_suggestions(self, corpus):
        r = FileResolver(corpus).resolve("Handlers/RefundHandlerWorker.cs")
        assert r.match_type is MatchType.UNRESOLVED
        assert r.suggestions == []

    def test_no_corpus_trusts_paths(self):
        r = FileResolver(None).resolve("Anything/AtAll.cs")
        assert r.match_type is MatchType.EXACT
        assert r.exists
        assert r.resolved_path == "Anything/AtAll.cs"

    def test_empty_corpus_resolves_nothing(self):
        r = FileResolver([]).resolve("src/A.cs")
        assert r.match_type is MatchType.UNRESOLVED
        assert r.suggestions == []

    def test_custom_distance_limit(self, corpus):
        strict = ResolverConfig(max_levenshtein_distance=0)
        r = FileResolver(corpus, strict).resolve("src/Services/PaymentSrvice.cs")
        assert r.match_type is MatchType.UNRESOLVED

    def test_resolve_all_preserves_order(self, corpus):
        results = FileResolver(corpus).resolve_all(
            ["BillingService.cs", "src/Models/Payment.cs"]
        )
        assert [r.match_type for r in results] == [MatchType.FILENAME, MatchType.EXACT]


class TestFindByLevenshtein:
    def test_sorted_and_bounded(self, corpus):
        matches = find_by_levenshtein("PaymentServic.cs", corpus, 5)
        distances = [d for _, d in matches]
        assert distances == sorted(distances)
        assert all(d <= 5 for d in distances)
        assert matches[0] == ("src/Services/PaymentService.cs", 1)

    def test_ties_keep_corpus_order(self):
        candidates = ["a/abc.cs", "b/abd.cs", "c/abe.cs"]
        matches = find_by_levenshtein("abx.cs", candidates, 1)
        assert [p for p, _ in matches] == candidates

    def test_nothing_qualifies(self, corpus):
        assert find_by_levenshtein("zzzzzzzzzzzzzzzzzzzz.cs", corpus, 2) == []


class TestGetSuggestions:
    def test_at_most_limit(self, corpus):
        assert len(get_suggestions("", corpus)) == 5
        assert len(get_suggestions("pay", corpus, limit=2)) == 2

    def test_case_insensitive_filename_only(self, corpus):
        # "src" appears in every directory but no filename
        assert get_suggestions("SRC", corpus) == []
        assert get_suggestions("BILLING", corpus) == ["src/Services/BillingService.cs"]

    def test_zero_limit(self, corpus):
        assert get_suggestions("pay", corpus, limit=0) == []
