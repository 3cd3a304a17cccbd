import unittest

from collato.constants import COLLATION_TYPES
from collato.engine import CANONICAL, PRIMARY, SECONDARY, TERTIARY
from collato.exceptions import InvalidOption
from collato.negotiator import ExtensionValues
from collato.options import CollatorOptions, resolve, validate_options
from collato.state import CollatorState

from tests.engines import PlainEngine, RecordingEngine


def _resolve(
        base: str = "en-US",
        extensions: ExtensionValues = ExtensionValues(),
        **options: object) -> CollatorState:
    return resolve(
        validate_options(**options), extensions, base,  # type: ignore
        RecordingEngine)


class CollatoTestValidateOptions(unittest.TestCase):

    def test_defaults(self) -> None:
        self.assertEqual(CollatorOptions(), validate_options())

    def test_rejects_unknown_enum_values(self) -> None:
        for name, value in [
                ("usage", "filter"), ("sensitivity", "loose"),
                ("case_first", "UPPER"), ("locale_matcher", "exact"),
                ("usage", None)]:
            with self.assertRaises(InvalidOption):
                validate_options(**{name: value})  # type: ignore

    def test_invalid_option_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            validate_options(sensitivity="loose")

    def test_numeric_must_be_bool(self) -> None:
        with self.assertRaises(InvalidOption):
            validate_options(numeric="true")  # type: ignore
        self.assertTrue(validate_options(numeric=True).numeric)

    def test_ignore_punctuation_is_coerced(self) -> None:
        self.assertTrue(
            validate_options(ignore_punctuation=1).ignore_punctuation)
        self.assertFalse(
            validate_options(ignore_punctuation="").ignore_punctuation)

    def test_collation_must_be_a_type_subtag(self) -> None:
        for collation in ["x", "phone book", "toolongvalue", "-pinyin"]:
            with self.assertRaises(InvalidOption):
                validate_options(collation=collation)
        self.assertEqual(
            "pinyin", validate_options(collation="PinYin").collation)
        self.assertEqual(
            "unknown", validate_options(collation="unknown").collation)


class CollatoTestResolve(unittest.TestCase):

    def test_defaults(self) -> None:
        state = _resolve()
        self.assertTrue(state.initialized)
        self.assertEqual("en-US", state.locale)
        self.assertEqual("sort", state.usage)
        self.assertEqual("variant", state.sensitivity)
        self.assertEqual("default", state.collation)
        self.assertFalse(state.numeric)
        self.assertEqual("false", state.case_first)
        self.assertFalse(state.ignore_punctuation)

    def test_engine_configuration(self) -> None:
        engine = _resolve().engine
        assert isinstance(engine, RecordingEngine)
        self.assertEqual("en-US", engine.locale_tag)
        self.assertEqual(CANONICAL, engine.decomposition)
        self.assertEqual(TERTIARY, engine.strength)
        self.assertIsNone(engine.shifted)

    def test_sensitivity_maps_to_strength(self) -> None:
        expected = {
            "base": PRIMARY,
            "accent": SECONDARY,
            "case": TERTIARY,
            "variant": TERTIARY,
        }
        for sensitivity, strength in expected.items():
            state = _resolve(sensitivity=sensitivity)
            self.assertEqual(sensitivity, state.sensitivity)
            self.assertEqual(strength, state.engine.strength)  # type: ignore

    def test_collation_keyword_is_reinjected(self) -> None:
        state = _resolve("de-DE", ExtensionValues(collation="phonebk"))
        self.assertEqual("phonebk", state.collation)
        self.assertEqual("de-DE-u-co-phonebk", state.locale)
        self.assertEqual(
            "de-DE-u-co-phonebk", state.engine.locale_tag)  # type: ignore

    def test_every_allowed_collation_is_accepted(self) -> None:
        for collation in COLLATION_TYPES:
            state = _resolve("zh", ExtensionValues(collation=collation))
            self.assertEqual(collation, state.collation)
            self.assertEqual("zh-u-co-{}".format(collation), state.locale)

    def test_unknown_collation_falls_back_to_default(self) -> None:
        for collation in ["standard", "search", "foo", "phonebook"]:
            state = _resolve("de-DE", ExtensionValues(collation=collation))
            self.assertEqual("default", state.collation)
            self.assertEqual("de-DE", state.locale)
            self.assertNotIn("-u-", state.engine.locale_tag)  # type: ignore

    def test_explicit_collation_beats_keyword(self) -> None:
        state = _resolve(
            "zh", ExtensionValues(collation="pinyin"), collation="stroke")
        self.assertEqual("stroke", state.collation)
        self.assertEqual("zh-u-co-stroke", state.locale)

    def test_unknown_explicit_collation_falls_back_to_default(self) -> None:
        state = _resolve(
            "zh", ExtensionValues(collation="pinyin"), collation="unknown")
        self.assertEqual("default", state.collation)
        self.assertEqual("zh", state.locale)

    def test_search_usage_forces_search_collation(self) -> None:
        state = _resolve(
            "de-DE", ExtensionValues(collation="phonebk"),
            usage="search", collation="pinyin")
        self.assertEqual("search", state.usage)
        self.assertEqual("search", state.collation)
        self.assertEqual("de-DE", state.locale)
        self.assertEqual(
            "de-DE-u-co-search", state.engine.locale_tag)  # type: ignore

    def test_numeric_precedence(self) -> None:
        self.assertFalse(_resolve().numeric)
        self.assertTrue(
            _resolve(extensions=ExtensionValues(numeric=True)).numeric)
        self.assertFalse(
            _resolve(extensions=ExtensionValues(numeric=True),
                     numeric=False).numeric)
        self.assertTrue(_resolve(numeric=True).numeric)

    def test_case_first_precedence(self) -> None:
        self.assertEqual("false", _resolve().case_first)
        self.assertEqual(
            "upper",
            _resolve(
                extensions=ExtensionValues(case_first="upper")).case_first)
        self.assertEqual(
            "lower",
            _resolve(extensions=ExtensionValues(case_first="upper"),
                     case_first="lower").case_first)

    def test_numeric_and_case_first_stay_out_of_locales(self) -> None:
        state = _resolve(
            "pl-PL", ExtensionValues(numeric=True, case_first="upper"))
        self.assertTrue(state.numeric)
        self.assertEqual("upper", state.case_first)
        self.assertEqual("pl-PL", state.locale)
        self.assertEqual("pl-PL", state.engine.locale_tag)  # type: ignore

    def test_ignore_punctuation_enables_shifted_handling(self) -> None:
        state = _resolve(ignore_punctuation=True)
        self.assertTrue(state.ignore_punctuation)
        self.assertTrue(state.engine.shifted)  # type: ignore

    def test_ignore_punctuation_without_engine_support(self) -> None:
        state = resolve(
            validate_options(ignore_punctuation=True), ExtensionValues(),
            "en", PlainEngine)
        self.assertTrue(state.initialized)
        self.assertTrue(state.ignore_punctuation)
        self.assertIsNone(state.engine.shifted)  # type: ignore

    def test_base_locale_extensions_are_dropped(self) -> None:
        state = _resolve("de-DE-u-co-trad")
        self.assertEqual("de-DE", state.locale)

    def test_engine_failure_propagates(self) -> None:
        def broken(locale_tag: str) -> RecordingEngine:
            raise RuntimeError("no data for {}".format(locale_tag))

        with self.assertRaises(RuntimeError):
            resolve(CollatorOptions(), ExtensionValues(), "en", broken)
