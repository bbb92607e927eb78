import unittest
from datetime import date

from lottery_admin.models import Draw, WinningNumber
from tests.support import AppTestCase


class DrawRoutesTests(AppTestCase):
    def setUp(self):
        super().setUp()
        self.sign_in_as_admin()

    def test_create_defaults_to_upcoming(self):
        response = self.client.post("/api/draws", json={"draw_date": "2025-02-01", "jackpot_amount": 250000})
        self.assertEqual(response.status_code, 201)
        data = response.get_json()["data"]
        self.assertEqual(data["draw_date"], "2025-02-01")
        self.assertEqual(data["status"], "upcoming")
        self.assertEqual(data["jackpot_amount"], 250000.0)
        self.assertEqual(data["jackpot_display"], "ETB 250,000.00")
        self.assertEqual(self.count(Draw), 1)

    def test_create_rejects_bad_input(self):
        cases = [
            {"jackpot_amount": 10},
            {"draw_date": "not-a-date", "jackpot_amount": 10},
            {"draw_date": "2025-02-01", "jackpot_amount": -1},
            {"draw_date": "2025-02-01", "jackpot_amount": 10, "status": "cancelled"},
        ]
        for payload in cases:
            with self.subTest(payload=payload):
                response = self.client.post("/api/draws", json=payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json()["error"]["code"], "validation_error")
        self.assertEqual(self.count(Draw), 0)

    def test_list_is_newest_draw_first_and_paginated(self):
        for day in range(1, 13):
            self.add_draw(draw_date=date(2025, 1, day))

        first = self.client.get("/api/draws").get_json()["data"]
        self.assertEqual(len(first["items"]), 10)
        self.assertEqual(first["items"][0]["draw_date"], "2025-01-12")
        self.assertEqual(first["pagination"]["total"], 12)
        self.assertEqual(first["pagination"]["total_pages"], 2)

        second = self.client.get("/api/draws?page=2").get_json()["data"]
        self.assertEqual([d["draw_date"] for d in second["items"]], ["2025-01-02", "2025-01-01"])
        self.assertEqual((second["pagination"]["start"], second["pagination"]["end"]), (11, 12))

    def test_list_filters_by_status_and_searches(self):
        self.add_draw(draw_date=date(2025, 1, 1), status="completed")
        self.add_draw(draw_date=date(2025, 2, 1), status="active")
        self.add_draw(draw_date=date(2025, 3, 1), status="upcoming")

        active = self.client.get("/api/draws?status=active").get_json()["data"]
        self.assertEqual([d["status"] for d in active["items"]], ["active"])

        everything = self.client.get("/api/draws?status=all").get_json()["data"]
        self.assertEqual(everything["pagination"]["total"], 3)

        searched = self.client.get("/api/draws?q=2025-03").get_json()["data"]
        self.assertEqual([d["draw_date"] for d in searched["items"]], ["2025-03-01"])

    def test_non_numeric_page_is_rejected(self):
        self.assertEqual(self.client.get("/api/draws?page=abc").status_code, 400)

    def test_get_missing_draw_is_404(self):
        response = self.client.get("/api/draws/999")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error"]["message"], "Draw 999 not found")

    def test_update_changes_only_given_fields(self):
        draw = self.add_draw()
        response = self.client.patch(f"/api/draws/{draw.id}", json={"status": "active"})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()["data"]
        self.assertEqual(data["status"], "active")
        self.assertEqual(data["jackpot_amount"], draw.jackpot_amount)
        self.assertEqual(data["draw_date"], draw.draw_date.isoformat())

    def test_update_with_empty_payload_is_rejected(self):
        draw = self.add_draw()
        response = self.client.patch(f"/api/draws/{draw.id}", json={})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"]["message"], "No fields to update")

    def test_update_missing_draw_is_404(self):
        self.assertEqual(self.client.patch("/api/draws/5", json={"status": "active"}).status_code, 404)

    def test_delete_removes_draw_and_its_winning_numbers(self):
        draw = self.add_draw()
        other = self.add_draw(draw_date=date(2025, 1, 12))
        self.add_winning_number(draw.id, "212-1111111", 1)
        self.add_winning_number(draw.id, "212-2222222", 2)
        self.add_winning_number(other.id, "212-3333333", 1)

        response = self.client.delete(f"/api/draws/{draw.id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["data"], {"id": draw.id, "deleted": True})
        self.assertEqual(self.count(Draw), 1)
        self.assertEqual(self.count(WinningNumber, draw_id=draw.id), 0)
        self.assertEqual(self.count(WinningNumber, draw_id=other.id), 1)

    def test_delete_missing_draw_is_404(self):
        self.assertEqual(self.client.delete("/api/draws/42").status_code, 404)

    def test_delete_draw_with_tickets_is_a_conflict(self):
        draw = self.add_draw()
        user = self.add_user("player@example.com")
        self.add_ticket(user.id, draw.id, "T-0001")

        response = self.client.delete(f"/api/draws/{draw.id}")
        self.assertEqual(response.status_code, 409)
        self.assertEqual(self.count(Draw), 1)


if __name__ == "__main__":
    unittest.main()
