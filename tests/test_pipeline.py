from __future__ import annotations

import unittest

from brief_builder import ContentRole, iterate_content_steps, load_profile, synthesize_structure
from brief_builder.config import AppConfig, StructureConfig
from brief_builder.render import render_markdown, structure_to_dict


def _fx_payload(competitors: int = 5) -> dict:
    return {
        "keyword": "FXおすすめ",
        "intent_stats": {"informational": 0.4, "transactional": 0.6},
        "top_content_type": "comparison",
        "competitors": [
            {"rank": i, "url": f"https://fx{i}.example.com", "headers": [["h2", "手数料を比較する"]]}
            for i in range(1, competitors + 1)
        ],
        "ideas": {"people_also_ask": [{"q": "FXは儲かる？"}]},
    }


class TestSynthesizeStructure(unittest.TestCase):
    def test_fx_comparison_scenario(self) -> None:
        structure = synthesize_structure(load_profile(_fx_payload()))
        self.assertIn("比較・おすすめランキング15選", structure.title)
        self.assertEqual(structure.sections[1].role, ContentRole.conclusion)
        self.assertIn("手数料を比較する", structure.find(ContentRole.comparison_points).h3s)
        self.assertEqual(structure.find(ContentRole.faq).h3s, ("FXは儲かる？",))

    def test_untrimmed_keyword_is_used_as_title(self) -> None:
        payload = dict(_fx_payload(), keyword=" FX ", top_content_type="guide")
        structure = synthesize_structure(load_profile(payload))
        self.assertEqual(structure.title, " FX ")
        self.assertEqual(structure.sections[0].h2, " FX とは？基本知識を解説")

    def test_zero_competitors_still_yields_all_roles(self) -> None:
        structure = synthesize_structure(load_profile(_fx_payload(competitors=0)))
        self.assertEqual(set(structure.roles()), set(ContentRole))
        self.assertEqual(len(structure.sections), 8)
        for section in structure.sections:
            expected = ("FXは儲かる？",) if section.role is ContentRole.faq else ()
            self.assertEqual(section.h3s, expected)

    def test_config_is_passed_through(self) -> None:
        config = AppConfig(structure=StructureConfig(comparison_title_template="{keyword}の比較"))
        structure = synthesize_structure(load_profile(_fx_payload()), config)
        self.assertEqual(structure.title, "FXおすすめの比較")

    def test_steps_follow_structure_order(self) -> None:
        profile = load_profile(_fx_payload())
        structure = synthesize_structure(profile)
        steps = list(iterate_content_steps(profile, structure))
        self.assertEqual([s.h2 for s in steps], [sec.h2 for sec in structure.sections])


class TestRender(unittest.TestCase):
    def test_structure_to_dict(self) -> None:
        data = structure_to_dict(synthesize_structure(load_profile(_fx_payload())))
        self.assertEqual(len(data["sections"]), 8)
        self.assertEqual(data["sections"][1]["role"], "conclusion")
        self.assertIsInstance(data["sections"][0]["h3s"], list)

    def test_render_markdown(self) -> None:
        text = render_markdown(synthesize_structure(load_profile(_fx_payload())))
        lines = text.splitlines()
        self.assertEqual(lines[0], "# FXおすすめ比較・おすすめランキング15選【2026年最新】")
        self.assertIn("## FXおすすめ選びで失敗しないための比較ポイント", lines)
        index = lines.index("## FXおすすめ選びで失敗しないための比較ポイント")
        self.assertEqual(lines[index + 1], "### 手数料を比較する")
        self.assertEqual(sum(1 for line in lines if line.startswith("## ")), 8)


if __name__ == "__main__":
    unittest.main()
