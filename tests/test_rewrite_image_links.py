"""Tests for rewriting image links after a rename"""

import unittest

from rewrite_image_links import LINK_FORMAT_MARKDOWN, LINK_FORMAT_WIKI, rewrite_image_links


class TestRewriteImageLinks(unittest.TestCase):
    def test_example_to_wiki(self):
        content = "![[pic1.png]]\n![alt](pic2.jpg)\n"
        rename_map = {"pic1.png": "zd-001.png", "pic2.jpg": "zd-002.jpg"}
        self.assertEqual(
            rewrite_image_links(content, rename_map, LINK_FORMAT_WIKI),
            "![[zd-001.png]]\n![[zd-002.jpg|alt]]\n",
        )

    def test_markdown_output_keeps_markdown(self):
        content = "![alt](pic2.jpg) ![](pic2.jpg) ![[pic2.jpg|w]]"
        result = rewrite_image_links(content, {"pic2.jpg": "zd-002.jpg"}, LINK_FORMAT_MARKDOWN)
        self.assertEqual(result, "![alt](zd-002.jpg) ![](zd-002.jpg) ![[zd-002.jpg|w]]")

    def test_empty_markdown_alt_to_plain_wiki(self):
        result = rewrite_image_links("![](a.png)", {"a.png": "n.png"}, LINK_FORMAT_WIKI)
        self.assertEqual(result, "![[n.png]]")

    def test_every_occurrence_replaced(self):
        content = "![[a.png]] x ![[a.png|one]] y ![two](a.png) z ![[a.png]]"
        result = rewrite_image_links(content, {"a.png": "n.png"}, LINK_FORMAT_WIKI)
        self.assertEqual(result, "![[n.png]] x ![[n.png|one]] y ![[n.png|two]] z ![[n.png]]")

    def test_anchor_preserved(self):
        result = rewrite_image_links("![[a.svg#part|cap]]", {"a.svg": "n.svg"})
        self.assertEqual(result, "![[n.svg#part|cap]]")

    def test_unmapped_untouched(self):
        content = "![[keep.png|k]] ![k](keep.png) ![[a.png]]"
        result = rewrite_image_links(content, {"a.png": "n.png"})
        self.assertEqual(result, "![[keep.png|k]] ![k](keep.png) ![[n.png]]")

    def test_prefix_names_not_confused(self):
        content = "![[a.png]] ![[a.png.png]] ![[ba.png]]"
        result = rewrite_image_links(content, {"a.png": "x.png"})
        self.assertEqual(result, "![[x.png]] ![[a.png.png]] ![[ba.png]]")

    def test_regex_metacharacters_escaped(self):
        content = "![[img(1)+x$.png]] ![](a*b?.png) ![](aab.png)"
        rename_map = {"img(1)+x$.png": "zd-001.png", "a*b?.png": "zd-002.png"}
        result = rewrite_image_links(content, rename_map)
        self.assertEqual(result, "![[zd-001.png]] ![[zd-002.png]] ![](aab.png)")

    def test_no_change_returns_same_object(self):
        content = "![[other.png]]"
        self.assertIs(rewrite_image_links(content, {}), content)
        self.assertIs(rewrite_image_links(content, {"a.png": "b.png"}), content)

    def test_plain_wiki_link_not_touched(self):
        content = "[[a.png]] and [a](a.png)"
        self.assertIs(rewrite_image_links(content, {"a.png": "b.png"}), content)

    def test_log_called(self):
        lines = []
        rewrite_image_links("![[a.png]]", {"a.png": "b.png"}, log=lines.append)
        self.assertTrue(any("![[b.png]]" in line for line in lines))


if __name__ == "__main__":
    unittest.main()
