"""
Unit tests for theme assembly, override merging and basic theme checks.
Run from project root: python -m pytest tests/ -v
"""
import copy
import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SAMPLE = ["#0b6efd", "#0fcfdf", "#06d6a0", "#ffd166", "#7b61ff", "#6b7280", "#ef476f"]


def _sample_theme(**kwargs):
    from pbix_theme.theme import assemble_theme

    return assemble_theme({"name": "Sample", "colors": list(SAMPLE)}, **kwargs)


class TestAssembleTheme(unittest.TestCase):
    """Palette -> theme document."""

    def test_minimal_document_keys(self):
        theme = _sample_theme()
        self.assertEqual(set(theme), {"name", "dataColors", "background", "foreground", "tableAccent"})
        self.assertEqual(theme["name"], "Sample")
        self.assertEqual(theme["dataColors"], SAMPLE)
        self.assertEqual(theme["background"], "#ffffff")
        self.assertEqual(theme["foreground"], "#000000")
        self.assertEqual(theme["tableAccent"], "#0b6efd")

    def test_bar_chart_uses_accent(self):
        """End to end: barChart dataPoint fill is the accent role (second color)."""
        theme = _sample_theme(include_visual_styles=True)
        entry = theme["visualStyles"]["barChart"]["*"]["dataPoint"][0]
        self.assertEqual(entry, {"fill": {"solid": {"color": "#0fcfdf"}}})

    def test_data_colors_capped_in_order(self):
        from pbix_theme.theme import MAX_DATA_COLORS, assemble_theme

        for n in (0, 1, 7, 20, 21, 35):
            colors = [f"#{i:06x}" for i in range(n)]
            theme = assemble_theme({"colors": colors})
            self.assertEqual(len(theme["dataColors"]), min(n, MAX_DATA_COLORS))
            self.assertEqual(theme["dataColors"], colors[:MAX_DATA_COLORS])

    def test_duplicates_kept(self):
        from pbix_theme.theme import assemble_theme

        theme = assemble_theme({"colors": ["#111111", "#111111"]})
        self.assertEqual(theme["dataColors"], ["#111111", "#111111"])

    def test_defaults_for_empty_palette(self):
        from pbix_theme.theme import assemble_theme

        theme = assemble_theme({"colors": []})
        self.assertEqual(theme["name"], "Generated theme")
        self.assertEqual(theme["tableAccent"], "#0078d4")

    def test_explicit_metadata_wins(self):
        from pbix_theme.schema import Palette
        from pbix_theme.theme import assemble_theme

        pal = Palette(colors=["#111111"], name="X", background="#fafafa", foreground="#222222", table_accent="#ff0000")
        theme = assemble_theme(pal)
        self.assertEqual(theme["background"], "#fafafa")
        self.assertEqual(theme["foreground"], "#222222")
        self.assertEqual(theme["tableAccent"], "#ff0000")
        from_dict = assemble_theme({"colors": ["#111111"], "tableAccent": "#ff0000"})
        self.assertEqual(from_dict["tableAccent"], "#ff0000")

    def test_visual_styles_cover_catalogue(self):
        from pbix_theme.theme import VISUAL_TYPES

        styles = _sample_theme(include_visual_styles=True)["visualStyles"]
        self.assertEqual(set(styles), {"*", *VISUAL_TYPES})
        for visual, body in styles.items():
            self.assertEqual(list(body), ["*"], visual)
            for card, entries in body["*"].items():
                self.assertIsInstance(entries, list)
                for entry in entries:
                    self.assertEqual(len(entry), 1, f"{visual}/{card}")
                    (value,) = entry.values()
                    self.assertEqual(list(value), ["solid"])

    def test_global_and_surface_entries(self):
        styles = _sample_theme(include_visual_styles=True)["visualStyles"]
        self.assertEqual(styles["*"]["*"]["title"], [{"color": {"solid": {"color": "#0b6efd"}}}])
        self.assertEqual(styles["*"]["*"]["label"], [{"color": {"solid": {"color": "#6b7280"}}}])
        self.assertEqual(styles["table"]["*"]["header"], [{"background": {"solid": {"color": "#0b6efd"}}}])
        container = styles["visualContainer"]["*"]
        self.assertEqual(container["background"], [{"color": {"solid": {"color": "#ffffff"}}}])
        self.assertEqual(container["foreground"], [{"color": {"solid": {"color": "#000000"}}}])

    def test_short_palette_uses_token_defaults(self):
        from pbix_theme.theme import assemble_theme

        theme = assemble_theme({"colors": ["#123456"]}, include_visual_styles=True)
        styles = theme["visualStyles"]
        self.assertEqual(styles["columnChart"]["*"]["dataPoint"][0]["fill"]["solid"]["color"], "#123456")
        self.assertEqual(styles["barChart"]["*"]["dataPoint"][0]["fill"]["solid"]["color"], "#0fcfdf")

    def test_tokens_do_not_leak(self):
        theme = _sample_theme(include_visual_styles=True)
        self.assertEqual(
            set(theme), {"name", "dataColors", "background", "foreground", "tableAccent", "visualStyles"}
        )
        json.dumps(theme)


class TestMergeStyleOverrides(unittest.TestCase):
    """Append-only layering of override tables."""

    def test_token_reference_resolves(self):
        from pbix_theme.theme import merge_style_overrides

        theme = _sample_theme(include_visual_styles=True)
        out = merge_style_overrides(theme, {"barChart": {"dataPoint": {"fill": "danger"}}})
        self.assertIs(out, theme)
        entries = theme["visualStyles"]["barChart"]["*"]["dataPoint"]
        self.assertEqual(len(entries), 2)
        self.assertEqual(entries[0], {"fill": {"solid": {"color": "#0fcfdf"}}})
        self.assertEqual(entries[1], {"fill": {"solid": {"color": "#ef476f"}}})

    def test_literal_used_verbatim(self):
        from pbix_theme.theme import merge_style_overrides

        theme = _sample_theme(include_visual_styles=True)
        merge_style_overrides(theme, {"lineChart": {"lines": {"stroke": "#ABCDEF"}}})
        self.assertEqual(
            theme["visualStyles"]["lineChart"]["*"]["lines"][-1], {"stroke": {"solid": {"color": "#ABCDEF"}}}
        )

    def test_one_entry_per_property_in_order(self):
        from pbix_theme.theme import merge_style_overrides

        theme = _sample_theme(include_visual_styles=True)
        merge_style_overrides(theme, {"card": {"title": {"color": "accent", "background": "#000000"}}})
        entries = theme["visualStyles"]["card"]["*"]["title"]
        self.assertEqual(
            entries[1:],
            [{"color": {"solid": {"color": "#0fcfdf"}}}, {"background": {"solid": {"color": "#000000"}}}],
        )

    def test_creates_missing_levels(self):
        from pbix_theme.theme import merge_style_overrides

        theme = _sample_theme()
        self.assertNotIn("visualStyles", theme)
        merge_style_overrides(theme, {"gauge": {"target": {"color": "success"}}})
        self.assertEqual(theme["visualStyles"], {"gauge": {"*": {"target": [{"color": {"solid": {"color": "#06d6a0"}}}]}}})

    def test_empty_table_is_noop(self):
        from pbix_theme.theme import merge_style_overrides

        theme = _sample_theme()
        before = copy.deepcopy(theme)
        self.assertIs(merge_style_overrides(theme, {}), theme)
        self.assertIs(merge_style_overrides(theme, None), theme)
        self.assertEqual(theme, before)

    def test_merges_stack(self):
        """Merging A then B leaves everything A added in place."""
        from pbix_theme.theme import merge_style_overrides

        theme = _sample_theme(include_visual_styles=True)
        merge_style_overrides(theme, {"barChart": {"dataPoint": {"fill": "info"}}})
        after_a = copy.deepcopy(theme)
        merge_style_overrides(theme, {"barChart": {"dataPoint": {"fill": "#000000"}}})
        entries = theme["visualStyles"]["barChart"]["*"]["dataPoint"]
        self.assertEqual(entries[: len(after_a["visualStyles"]["barChart"]["*"]["dataPoint"])],
                         after_a["visualStyles"]["barChart"]["*"]["dataPoint"])
        self.assertEqual(len(entries), 3)

    def test_explicit_tokens(self):
        from pbix_theme.theme import merge_style_overrides

        theme = _sample_theme()
        merge_style_overrides(theme, {"pieChart": {"slices": {"fill": "brand"}}}, tokens={"brand": "#123123"})
        self.assertEqual(theme["visualStyles"]["pieChart"]["*"]["slices"], [{"fill": {"solid": {"color": "#123123"}}}])

    def test_malformed_table_leaves_theme_untouched(self):
        from pbix_theme.theme import OverrideTableError, merge_style_overrides

        bad_tables = [
            ["not", "a", "mapping"],
            {"barChart": ["x"]},
            {"barChart": {"dataPoint": "accent"}},
            {"barChart": {"dataPoint": {"fill": "accent"}}, "lineChart": {"lines": {"stroke": 5}}},
            {"barChart": {"dataPoint": {"fill": ""}}},
        ]
        for table in bad_tables:
            theme = _sample_theme(include_visual_styles=True)
            before = copy.deepcopy(theme)
            with self.assertRaises(OverrideTableError):
                merge_style_overrides(theme, table)
            self.assertEqual(theme, before, table)

    def test_error_carries_path(self):
        from pbix_theme.theme import OverrideTableError, merge_style_overrides

        with self.assertRaises(OverrideTableError) as ctx:
            merge_style_overrides(_sample_theme(), {"lineChart": {"lines": {"stroke": 5}}})
        self.assertEqual(ctx.exception.path, ("lineChart", "lines", "stroke"))
        self.assertIn("lineChart/lines/stroke", str(ctx.exception))

    def test_malformed_target_leaves_theme_untouched(self):
        from pbix_theme.theme import OverrideTableError, merge_style_overrides

        theme = _sample_theme(include_visual_styles=True)
        theme["visualStyles"]["barChart"]["*"]["dataPoint"] = {"fill": "oops"}
        before = copy.deepcopy(theme)
        with self.assertRaises(OverrideTableError):
            merge_style_overrides(theme, {"card": {"title": {"color": "accent"}}, "barChart": {"dataPoint": {"fill": "accent"}}})
        self.assertEqual(theme, before)


class TestLoadOverrideTable(unittest.TestCase):
    """JSON / YAML override files."""

    def _write(self, d: str, name: str, text: str) -> Path:
        p = Path(d) / name
        p.write_text(text, encoding="utf-8")
        return p

    def test_json_and_yaml(self):
        from pbix_theme.theme import load_override_table

        with tempfile.TemporaryDirectory() as d:
            j = self._write(d, "m.json", json.dumps({"barChart": {"dataPoint": {"fill": "danger"}}}))
            y = self._write(d, "m.yaml", "barChart:\n  dataPoint:\n    fill: danger\n")
            self.assertEqual(load_override_table(j), load_override_table(y))
            empty = self._write(d, "empty.yml", "")
            self.assertEqual(load_override_table(empty), {})

    def test_errors(self):
        from pbix_theme.theme import OverrideTableError, load_override_table

        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(OverrideTableError):
                load_override_table(Path(d) / "missing.yaml")
            with self.assertRaises(OverrideTableError):
                load_override_table(self._write(d, "bad.json", "{not json"))
            with self.assertRaises(OverrideTableError):
                load_override_table(self._write(d, "list.yaml", "- a\n- b\n"))


class TestValidateTheme(unittest.TestCase):
    """Basic pre-schema checks."""

    def test_assembled_theme_passes(self):
        from pbix_theme.theme import validate_theme

        self.assertEqual(validate_theme(_sample_theme(include_visual_styles=True)), [])

    def test_reports_problems(self):
        from pbix_theme.theme import validate_theme

        self.assertEqual(validate_theme([]), ["theme must be a JSON object"])
        errors = validate_theme({"dataColors": [], "background": "#ffffff"})
        self.assertIn("dataColors must be a non-empty array", errors)
        self.assertIn("foreground is missing", errors)
        errors = validate_theme({"dataColors": ["#abc"], "background": "#fff", "foreground": "#000"})
        self.assertEqual(errors, ["dataColors[0] (#abc) is not a valid hex color"])


if __name__ == "__main__":
    unittest.main()
