"""Tests for the factor evaluators."""
import pytest
from conversion_scorer.content_types import ContentType
from conversion_scorer.factors import (
    BASE_SCORES,
    FactorScores,
    evaluate_call_to_action,
    evaluate_emotional_appeal,
    evaluate_factors,
    evaluate_social_proof,
    evaluate_trust_building,
    evaluate_urgency,
    evaluate_value_proposition,
    first_cta_position,
)
from conversion_scorer.lexicon import ENGLISH, JAPANESE


class TestBaseScores:
    def test_empty_content_yields_bases(self):
        factors = evaluate_factors("")
        assert factors.as_dict() == {
            "emotional_appeal": 50,
            "urgency": 30,
            "social_proof": 40,
            "value_proposition": 45,
            "call_to_action": 35,
            "trust_building": 40,
        }

    def test_plain_text_yields_bases(self):
        factors = evaluate_factors("The weather was mild and the train was on time.")
        assert factors.as_dict() == BASE_SCORES

    def test_factor_scores_reject_out_of_range(self):
        with pytest.raises(ValueError, match="urgency"):
            FactorScores(50, 101, 40, 45, 35, 40)


class TestEmotionalAppeal:
    def test_positive_words(self):
        assert evaluate_emotional_appeal("success and growth") == 66

    def test_pain_points(self):
        assert evaluate_emotional_appeal("a problem and a challenge") == 60

    def test_storytelling(self):
        assert evaluate_emotional_appeal("for example, last week") == 60
        assert evaluate_emotional_appeal("in practice") == 60

    def test_distinct_words_count_once(self):
        assert evaluate_emotional_appeal("success success success") == 58

    def test_case_sensitive(self):
        assert evaluate_emotional_appeal("SUCCESS") == 50

    def test_clamped(self):
        text = " ".join(ENGLISH.positive_words) + " for example"
        assert evaluate_emotional_appeal(text) == 100


class TestUrgency:
    def test_keyword(self):
        assert evaluate_urgency("Act now") == 45

    def test_overlapping_keywords_each_count(self):
        # "limited" and "limited time"
        assert evaluate_urgency("limited time") == 60

    def test_quantity_limited(self):
        # "limited" keyword plus the quantity pattern
        assert evaluate_urgency("50 slots limited") == 65

    def test_time_limited(self):
        assert evaluate_urgency("ends in 3 days") == 45
        assert evaluate_urgency("48 hours") == 45

    def test_last_chance(self):
        assert evaluate_urgency("last chance") == 45

    def test_clamped(self):
        text = "now, limited time, only, remaining, deadline, last chance, 20 units limited, 2 days"
        assert evaluate_urgency(text) == 100

    @pytest.mark.parametrize("text", ["Did you know this?", "This is commonly used", "unknown snow"])
    def test_no_credit_inside_other_words(self, text):
        assert evaluate_urgency(text) == 30

    def test_standalone_only(self):
        assert evaluate_urgency("the only way") == 45


class TestSocialProof:
    def test_case_studies(self):
        assert evaluate_social_proof("read our case studies") == 60

    def test_statistics(self):
        assert evaluate_social_proof("used by 1200 customers") == 55
        assert evaluate_social_proof("95% satisfaction") == 55
        assert evaluate_social_proof("3x faster") == 55

    def test_endorsement(self):
        assert evaluate_social_proof("recommended by doctors") == 55

    def test_rating(self):
        assert evaluate_social_proof("★★★★★") == 50
        assert evaluate_social_proof("top rating") == 50

    def test_all_signals(self):
        text = "customer testimonials, 500 people, endorsed by experts, ★"
        assert evaluate_social_proof(text) == 100


class TestValueProposition:
    def test_benefit_words(self):
        assert evaluate_value_proposition("a real benefit") == 53
        assert evaluate_value_proposition("savings and profit") == 61

    def test_quantified_percentage(self):
        assert evaluate_value_proposition("30% faster") == 65

    def test_quantified_currency(self):
        assert evaluate_value_proposition("keep $500 a year") == 65

    def test_quantified_multiplier(self):
        assert evaluate_value_proposition("3x the output") == 65

    def test_differentiation(self):
        assert evaluate_value_proposition("a unique approach") == 60

    def test_product_does_not_change_score(self):
        text = "a unique approach"
        assert evaluate_value_proposition(text, product="Acme") == evaluate_value_proposition(text)

    def test_clamped(self):
        text = " ".join(ENGLISH.benefit_words) + " 40% improvement unique"
        assert evaluate_value_proposition(text) == 100


class TestCallToAction:
    def test_single_cta_at_start(self):
        assert evaluate_call_to_action("click here to read") == 55

    def test_cta_in_closing_section(self):
        text = "x" * 80 + " click here"
        assert evaluate_call_to_action(text) == 65

    def test_email_multiple_ctas(self):
        text = "learn more or sign up now"
        assert evaluate_call_to_action(text, ContentType.EMAIL) == 85
        assert evaluate_call_to_action(text, ContentType.BLOG) == 75

    def test_email_single_cta_no_bonus(self):
        assert evaluate_call_to_action("download it", "email") == 55

    def test_unknown_type_behaves_like_blog(self):
        text = "learn more or sign up now"
        assert evaluate_call_to_action(text, "podcast") == 75

    def test_first_position(self):
        assert first_cta_position("abc buy now then learn more") == 4
        assert first_cta_position("nothing here") == -1

    def test_no_cta(self):
        assert evaluate_call_to_action("just reading") == 35

    def test_clamped(self):
        text = " ".join(ENGLISH.cta_phrases)
        assert evaluate_call_to_action(text, "email") == 100


class TestTrustBuilding:
    @pytest.mark.parametrize("text,expected", [
        ("money-back guarantee", 55),
        ("24/7 support", 55),
        ("a long track record", 50),
        ("12 years of experience", 50),
        ("contact us anytime", 50),
        ("certified coaches", 50),
    ])
    def test_single_signal(self, text, expected):
        assert evaluate_trust_building(text) == expected

    def test_all_signals(self):
        text = "support, track record, contact us, certified"
        assert evaluate_trust_building(text) == 85


class TestMonotonicity:
    def test_adding_keywords_never_lowers_factor(self):
        base = "Our course helps busy parents."
        before = evaluate_factors(base)
        after = evaluate_factors(base + " success, last chance, case studies, benefit, support")
        for name, score in before.as_dict().items():
            assert after.as_dict()[name] >= score

    def test_new_cta_phrase_never_lowers_cta(self):
        text = "x" * 80 + " buy now"
        assert evaluate_call_to_action("get started " + text) >= evaluate_call_to_action(text)

    def test_repeated_cta_can_drop_placement_bonus(self):
        # a second "buy now" moves the first CTA out of the closing section
        text = "x" * 80 + " buy now"
        assert evaluate_call_to_action(text) == 65
        assert evaluate_call_to_action("buy now " + text) == 55


class TestJapaneseLexicon:
    def test_emotional_appeal(self):
        assert evaluate_emotional_appeal("実際に成功しました", JAPANESE) == 68

    def test_urgency_patterns(self):
        assert evaluate_urgency("100名様限定", JAPANESE) == 65  # 限定 + quantity
        assert evaluate_urgency("3日間", JAPANESE) == 45

    def test_social_proof(self):
        assert evaluate_social_proof("お客様の声", JAPANESE) == 60

    def test_cta(self):
        assert evaluate_call_to_action("詳細はこちら", "blog", JAPANESE) == 55

    def test_english_lexicon_ignores_japanese(self):
        assert evaluate_social_proof("お客様の声", ENGLISH) == 40
