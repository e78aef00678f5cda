"""Tests for the block renderer."""

import re

import pytest

from content_proxy.content_store.models import (
    CtaBlock,
    FaqBlock,
    FaqItem,
    QuickAnswerBlock,
    UnknownBlock,
    WysiwygBlock,
)
from content_proxy.template_engine import BLOCK_TEMPLATES, BlockRenderer

RICH_TEXT = [{
    "_type": "block",
    "style": "normal",
    "markDefs": [],
    "children": [{"_type": "span", "text": "Texte riche", "marks": ["em"]}],
}]

STRUCTURAL_TAGS = re.compile(r'</?(section|h2|p|strong|em|div)( class="[^"]*")?>')


@pytest.fixture
def renderer() -> BlockRenderer:
    return BlockRenderer()


class TestBlockKinds:
    def test_every_known_kind_has_a_template(self):
        assert set(BLOCK_TEMPLATES) == {"wysiwygBlock", "faqBlock", "ctaBlock", "quickAnswerBlock"}

    def test_wysiwyg(self, renderer):
        html = renderer.render_block(WysiwygBlock(title="Section", content=RICH_TEXT))
        assert html.startswith("<section>")
        assert "<h2>Section</h2>" in html
        assert "<p><em>Texte riche</em></p>" in html
        assert html.rstrip().endswith("</section>")

    def test_quick_answer(self, renderer):
        html = renderer.render_block(QuickAnswerBlock(title="En bref", content=RICH_TEXT))
        assert '<section class="quick-answer">' in html
        assert "<h2>En bref</h2>" in html
        assert "<p><em>Texte riche</em></p>" in html

    def test_faq(self, renderer):
        block = FaqBlock(
            title="Questions",
            items=[
                FaqItem(question="Pourquoi ?", answer="Parce que."),
                FaqItem(question="Comment ?", answer="Ainsi."),
            ],
        )
        html = renderer.render_block(block)
        assert "<h2>Questions</h2>" in html
        assert html.count('<div class="faq-item">') == 2
        assert "<strong>Pourquoi ?</strong>" in html
        assert "<p>Parce que.</p>" in html
        assert html.index("Pourquoi") < html.index("Comment")

    def test_cta(self, renderer):
        html = renderer.render_block(CtaBlock(title="Offre", description="Description", btn_text="Acheter"))
        assert "<h2>Offre</h2>" in html
        assert "<p>Description</p>" in html
        assert "<p><strong>Acheter</strong></p>" in html

    def test_cta_missing_fields_omitted(self, renderer):
        html = renderer.render_block(CtaBlock(title="Offre"))
        assert "<p>" not in html
        assert "None" not in html

    def test_missing_title_omits_heading(self, renderer):
        html = renderer.render_block(WysiwygBlock(content=RICH_TEXT))
        assert "<h2>" not in html

    def test_empty_rich_text(self, renderer):
        html = renderer.render_block(WysiwygBlock(title="Vide"))
        assert "<h2>Vide</h2>" in html


class TestUnknownBlocks:
    def test_unknown_renders_empty(self, renderer):
        assert renderer.render_block(UnknownBlock(kind="productCarousel")) == ""

    def test_unknown_does_not_affect_siblings(self, renderer):
        siblings = [CtaBlock(title="Avant"), CtaBlock(title="Après")]
        with_unknown = [siblings[0], UnknownBlock(kind="productCarousel"), siblings[1]]
        assert renderer.render(with_unknown) == renderer.render(siblings)


class TestRender:
    def test_order_preserved(self, renderer):
        html = renderer.render([
            CtaBlock(title="Premier"),
            WysiwygBlock(title="Deuxième", content=RICH_TEXT),
            FaqBlock(title="Troisième"),
        ])
        assert html.index("Premier") < html.index("Deuxième") < html.index("Troisième")

    def test_empty_body(self, renderer):
        assert renderer.render([]) == ""

    def test_deterministic(self, renderer, sample_blog_raw):
        from content_proxy.content_store.models import BlogPost

        post = BlogPost.model_validate(sample_blog_raw)
        assert renderer.render(post.body) == renderer.render(post.body)


class TestEscaping:
    HOSTILE = '<img src=x onerror="alert(1)"> & <b>'

    def test_user_fields_escaped(self, renderer):
        html = renderer.render([
            CtaBlock(title=self.HOSTILE, description=self.HOSTILE, btn_text=self.HOSTILE),
            FaqBlock(title=self.HOSTILE, items=[FaqItem(question=self.HOSTILE, answer=self.HOSTILE)]),
            WysiwygBlock(title=self.HOSTILE),
            QuickAnswerBlock(title=self.HOSTILE),
        ])
        assert "<img" not in html
        assert "<b>" not in html
        assert "&lt;img src=x onerror=&#34;alert(1)&#34;&gt; &amp; &lt;b&gt;" in html

    def test_no_raw_angle_brackets_outside_tags(self, renderer):
        html = renderer.render([
            CtaBlock(title="<>&\"", description="a < b > c", btn_text='"x"'),
            FaqBlock(title="<", items=[FaqItem(question=">", answer="<&>")]),
        ])
        text = STRUCTURAL_TAGS.sub("", html)
        assert "<" not in text
        assert ">" not in text
