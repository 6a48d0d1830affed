import time

import pytest
from packages.notification_engine.constants import UNKNOWN_MERCHANT
from packages.notification_engine.merchant import extract_merchant, sanitize_merchant
from packages.notification_engine.normalizer import normalize
from packages.notification_engine.profiles import (
    BANK_SMS_PROFILE,
    WALLET_NOTIFICATION_PROFILE,
)


def _bank(raw):
    return extract_merchant(normalize(raw).display, BANK_SMS_PROFILE)


def _wallet(raw):
    return extract_merchant(normalize(raw).display, WALLET_NOTIFICATION_PROFILE)


class TestBankSmsExtraction:
    def test_stops_before_date_clause(self):
        assert _bank("Rs. 1,234.50 debited to ZOMATO on 12-05 ref 1234") == "ZOMATO"

    def test_excludes_trailing_balance(self):
        assert _bank("spent at STARBUCKS on 01-01 avl bal 500") == "STARBUCKS"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Rs 50 debited to BLUE TOKAI via UPI", "BLUE TOKAI"),
            ("Rs 50 debited to SHELL PUMP using card", "SHELL PUMP"),
            ("Rs 50 paid to AIRTEL ref 88812", "AIRTEL"),
            ("Rs 50 spent at DMART bal Rs 900", "DMART"),
            ("Rs 50 sent to MOM txn 1234", "MOM"),
            ("Rs 50 spent at KFC avl limit 9000", "KFC"),
            ("Rs 50 paid to H&M from a/c XX12", "H&M"),
            ("Rs 50 spent at CROSSWORD", "CROSSWORD"),
        ],
    )
    def test_each_terminator_ends_the_merchant(self, raw, expected):
        assert _bank(raw) == expected

    def test_spent_on_phrase_captures_upi_handle(self):
        assert _bank("INR 250 spent on user@ybl via UPI") == "user@ybl"

    def test_preposition_inside_a_word_is_not_a_prefix(self):
        # "at" inside "Kolkata", "to" inside "tomato"
        assert _bank("Rs 40 debited Kolkata tomato shop at BIG BAZAAR on 1-2") == "BIG BAZAAR"

    def test_terminator_inside_a_word_does_not_stop_capture(self):
        assert _bank("Rs 10 paid to ONLINE BAZAAR via upi") == "ONLINE BAZAAR"

    def test_leftmost_match_wins(self):
        assert _bank("Rs 10 paid to ALPHA on 1-1 at BETA") == "ALPHA"

    def test_no_prefix_returns_unknown(self):
        assert _bank("Rs 500 debited from your account") == UNKNOWN_MERCHANT

    def test_empty_text_returns_unknown(self):
        assert _bank("") == UNKNOWN_MERCHANT

    def test_unterminated_span_falls_through_to_next_prefix(self):
        assert _bank("Rs 10 paid to a!b at KFC on 2-2") == "KFC"


class TestWalletExtraction:
    def test_preserves_case(self):
        assert _wallet("You paid to Swiggy Ltd via wallet successful") == "Swiggy Ltd"

    def test_sent_to(self):
        assert _wallet("₹200 sent to Priya Sharma using PhonePe") == "Priya Sharma"

    def test_stops_before_successful(self):
        assert _wallet("Payment of ₹99 paid to Netflix successful") == "Netflix"

    def test_bare_to_is_not_a_prefix(self):
        assert _wallet("Transfer to Rahul on 01-01") == UNKNOWN_MERCHANT


class TestSanitizer:
    def test_strips_upi_handle_suffix(self):
        assert sanitize_merchant("user@ybl", BANK_SMS_PROFILE) == "USER"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("upi swiggy", "SWIGGY"),
            ("POS 4432 DMART", "4432 DMART"),
            ("imps rahul upi", "RAHUL"),
        ],
    )
    def test_removes_rail_tokens(self, raw, expected):
        assert sanitize_merchant(raw, BANK_SMS_PROFILE) == expected

    def test_rail_tokens_inside_words_are_kept(self):
        assert sanitize_merchant("posh cafe", BANK_SMS_PROFILE) == "POSH CAFE"

    def test_wallet_preserves_case_and_strips_rails(self):
        assert sanitize_merchant("UPI Swiggy Ltd", WALLET_NOTIFICATION_PROFILE) == "Swiggy Ltd"

    def test_only_noise_becomes_unknown(self):
        assert sanitize_merchant("upi", BANK_SMS_PROFILE) == UNKNOWN_MERCHANT
        assert sanitize_merchant("@ybl", BANK_SMS_PROFILE) == UNKNOWN_MERCHANT

    def test_unknown_is_not_recased(self):
        assert sanitize_merchant(UNKNOWN_MERCHANT, BANK_SMS_PROFILE) == UNKNOWN_MERCHANT


class TestLongInput:
    """Extraction stays linear on large or adversarial text."""

    @pytest.mark.parametrize(
        "raw",
        [
            "Rs 10 debited to a" + " " * 20000 + "!",
            "Rs 10 debited " + "to " * 7000 + "!",
            "Rs 10 debited " + "at x" * 5000 + "!",
        ],
    )
    def test_no_merchant_in_bounded_time(self, raw):
        started = time.perf_counter()
        assert _bank(raw) == UNKNOWN_MERCHANT
        assert time.perf_counter() - started < 0.5

    def test_long_merchant_before_terminator(self):
        raw = "Rs 10 debited to " + "x " * 10000 + "via upi"

        started = time.perf_counter()
        merchant = _bank(raw)

        assert time.perf_counter() - started < 0.5
        assert merchant.startswith("x x x")
        assert merchant.endswith("x")
