import unittest
from dataclasses import dataclass

from lottery_admin.errors import ValidationError
from lottery_admin.utils.listing import ListView, apply_query


@dataclass(frozen=True)
class Row:
    id: int
    email: str
    status: str


def _rows(n: int) -> list[Row]:
    return [Row(i, f"User{i}@Example.com", "active" if i % 2 else "expired") for i in range(1, n + 1)]


def _view(rows: list[Row], page_size: int = 10) -> ListView[Row]:
    return ListView(
        lambda: rows,
        search_fields=(lambda r: r.email, lambda r: r.id),
        filter_fields={"status": lambda r: r.status},
        page_size=page_size,
    ).refresh()


class ListViewTests(unittest.TestCase):
    def test_page_count_is_ceiling_of_filtered_size(self):
        for size, pages in ((0, 0), (1, 1), (10, 1), (11, 2), (25, 3)):
            with self.subTest(size=size):
                self.assertEqual(_view(_rows(size)).total_pages, pages)

    def test_pages_slice_the_filtered_items(self):
        view = _view(_rows(25)).go_to(3)
        self.assertEqual([r.id for r in view.page_items], [21, 22, 23, 24, 25])
        self.assertEqual(
            view.page_info(),
            {"page": 3, "total_pages": 3, "total": 25, "page_size": 10, "start": 21, "end": 25},
        )

    def test_search_is_case_insensitive_substring(self):
        view = _view(_rows(25)).set_search("user1")
        self.assertEqual([r.id for r in view.filtered], [1] + list(range(10, 20)))
        view.set_search("EXAMPLE.COM")
        self.assertEqual(view.total, 25)

    def test_search_matches_non_text_fields(self):
        view = _view(_rows(25)).set_search("25")
        self.assertEqual([r.id for r in view.filtered], [25])

    def test_changing_search_or_filter_returns_to_first_page(self):
        view = _view(_rows(25)).go_to(2)
        view.set_search("user")
        self.assertEqual(view.page, 1)

        view.go_to(2)
        view.set_filter("status", "active")
        self.assertEqual(view.page, 1)
        self.assertEqual(view.total, 13)

    def test_all_clears_a_filter(self):
        view = _view(_rows(6)).set_filter("status", "expired")
        self.assertEqual(view.total, 3)
        view.set_filter("status", "all")
        self.assertEqual(view.total, 6)
        self.assertEqual(view.filters, {})

    def test_filter_is_exact_match(self):
        view = _view(_rows(6)).set_filter("status", "activ")
        self.assertEqual(view.total, 0)

    def test_unknown_filter_is_an_error(self):
        with self.assertRaises(KeyError):
            _view(_rows(1)).set_filter("colour", "red")

    def test_go_to_clamps_into_range(self):
        view = _view(_rows(15))
        self.assertEqual(view.go_to(99).page, 2)
        self.assertEqual(view.go_to(-3).page, 1)
        self.assertEqual(_view([]).go_to(5).page, 1)

    def test_empty_page_info(self):
        self.assertEqual(
            _view([]).page_info(),
            {"page": 1, "total_pages": 0, "total": 0, "page_size": 10, "start": 0, "end": 0},
        )

    def test_refresh_reloads_and_resets_page(self):
        rows = _rows(15)
        calls = []

        def loader():
            calls.append(1)
            return list(rows)

        view = ListView(loader, page_size=10).refresh().go_to(2)
        rows.extend(_rows(30)[15:])
        view.refresh()
        self.assertEqual(len(calls), 2)
        self.assertEqual(view.page, 1)
        self.assertEqual(view.total, 30)


class ApplyQueryTests(unittest.TestCase):
    def test_applies_search_filters_and_page(self):
        view = apply_query(_view(_rows(40)), {"q": "example", "status": "active", "page": "2"}, ["status"])
        self.assertEqual(view.total, 20)
        self.assertEqual(view.page, 2)

    def test_filters_not_listed_are_ignored(self):
        view = apply_query(_view(_rows(4)), {"status": "active"})
        self.assertEqual(view.total, 4)

    def test_non_numeric_page_is_rejected(self):
        with self.assertRaises(ValidationError):
            apply_query(_view(_rows(4)), {"page": "two"})


if __name__ == "__main__":
    unittest.main()
