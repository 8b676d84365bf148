"""FAQ extraction tests against a fake Playwright page."""

import pytest

from src.scraper.extract import extract_faq_items, extract_page
from src.scraper.models import FaqItem

from .fakes import FakeFaq, FakePage, FakeSite

URL = "https://site.test/faq"


async def _load(site: FakeSite) -> FakePage:
    page = FakePage({URL: site})
    await page.goto(URL)
    return page


@pytest.mark.asyncio
async def test_extracts_items_in_document_order():
    site = FakeSite(faqs=[
        FakeFaq(question="First?", answer="One."),
        FakeFaq(question="Second?", answer="Two."),
        FakeFaq(question="Third?", answer="Three."),
    ])
    page = await _load(site)

    result = await extract_page(page, URL, faq_wait_timeout_ms=10, answer_wait_timeout_ms=5)

    assert result.url == URL
    assert [i.question for i in result.faq_items] == ["First?", "Second?", "Third?"]
    assert [i.answer for i in result.faq_items] == ["One.", "Two.", "Three."]


@pytest.mark.asyncio
async def test_question_and_answer_are_trimmed():
    page = await _load(FakeSite(faqs=[FakeFaq(question="Why?", answer="Because.")]))

    items = await extract_faq_items(page)

    assert items == [FaqItem(question="Why?", answer="Because.")]


@pytest.mark.asyncio
async def test_no_containers_gives_empty_items_but_keeps_text():
    page = await _load(FakeSite(faqs=[], body_text="Welcome to the site"))

    result = await extract_page(page, URL, faq_wait_timeout_ms=10)

    assert result.faq_items == []
    assert result.full_page_text == "Welcome to the site"


@pytest.mark.asyncio
async def test_missing_question_is_skipped():
    faqs = [
        FakeFaq(question="Kept?", answer="Yes."),
        FakeFaq(question=None),
        FakeFaq(question="Also kept?", answer="Also yes."),
    ]
    page = await _load(FakeSite(faqs=faqs))

    items = await extract_faq_items(page)

    assert [i.question for i in items] == ["Kept?", "Also kept?"]
    assert faqs[1].clicks == 0


@pytest.mark.asyncio
async def test_blank_question_is_skipped():
    page = await _load(FakeSite(faqs=[FakeFaq(question="   "), FakeFaq(question="Real?")]))

    items = await extract_faq_items(page)

    assert [i.question for i in items] == ["Real?"]


@pytest.mark.asyncio
async def test_missing_reveal_control_is_skipped():
    page = await _load(FakeSite(faqs=[
        FakeFaq(question="No button?", has_button=False),
        FakeFaq(question="Button?", answer="Here."),
    ]))

    items = await extract_faq_items(page)

    assert items == [FaqItem(question="Button?", answer="Here.")]


@pytest.mark.asyncio
async def test_answer_timeout_keeps_question_with_empty_answer():
    faqs = [
        FakeFaq(question="Hidden?", answer=None),
        FakeFaq(question="Shown?", answer="Visible."),
    ]
    page = await _load(FakeSite(faqs=faqs))

    items = await extract_faq_items(page, answer_wait_timeout_ms=5)

    assert items == [
        FaqItem(question="Hidden?", answer=""),
        FaqItem(question="Shown?", answer="Visible."),
    ]
    assert faqs[0].clicks == 1


@pytest.mark.asyncio
async def test_click_failure_keeps_question_with_empty_answer():
    page = await _load(FakeSite(faqs=[
        FakeFaq(question="Detached?", click_fails=True),
        FakeFaq(question="Fine?", answer="Fine."),
    ]))

    items = await extract_faq_items(page)

    assert items == [
        FaqItem(question="Detached?", answer=""),
        FaqItem(question="Fine?", answer="Fine."),
    ]


def test_page_result_serialises_camel_case():
    from src.scraper.models import PageResult

    result = PageResult(
        url=URL,
        faq_items=[FaqItem(question="Q", answer="A")],
        full_page_text="text",
    )

    assert result.model_dump(by_alias=True) == {
        "url": URL,
        "faqItems": [{"question": "Q", "answer": "A"}],
        "fullPageText": "text",
    }


@pytest.mark.asyncio
async def test_hidden_first_container_still_finds_faqs():
    page = await _load(FakeSite(
        faqs=[FakeFaq(question="After the nav?", answer="Found.")],
        first_container_hidden=True,
    ))

    items = await extract_faq_items(page, faq_wait_timeout_ms=10)

    assert page.wait_states == ["attached"]
    assert items == [FaqItem(question="After the nav?", answer="Found.")]


@pytest.mark.asyncio
async def test_detached_question_label_is_skipped():
    faqs = [
        FakeFaq(question="Gone?", question_detaches=True),
        FakeFaq(question="Still here?", answer="Yes."),
    ]
    page = await _load(FakeSite(faqs=faqs))

    result = await extract_page(page, URL)

    assert result.faq_items == [FaqItem(question="Still here?", answer="Yes.")]
    assert faqs[0].clicks == 0


@pytest.mark.asyncio
async def test_detached_answer_keeps_question_with_empty_answer():
    page = await _load(FakeSite(faqs=[
        FakeFaq(question="Flaky?", answer="Lost.", answer_detaches=True),
        FakeFaq(question="Steady?", answer="Kept."),
    ]))

    result = await extract_page(page, URL)

    assert result.faq_items == [
        FaqItem(question="Flaky?", answer=""),
        FaqItem(question="Steady?", answer="Kept."),
    ]
