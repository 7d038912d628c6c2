import unittest

from api_testcase import ApiTestCase


class DonationApiTests(ApiTestCase):
    def test_create_donation(self):
        response = self.client.post(
            "/api/v1/donations",
            json={"donorName": "Ada", "supplyTitle": "Rice", "amount": 3},
        )
        self.assertEqual(response.status_code, 201)
        payload = response.json()
        self.assertTrue(payload["success"])
        self.assertEqual(payload["message"], "Supply donation inserted successfully")
        self.assertIn("insertedId", payload["data"])
        self.assertEqual(self.db.donations.find_one()["donorName"], "Ada")

    def test_list_returns_every_donation(self):
        for amount in range(4):
            self.client.post("/api/v1/donations", json={"amount": amount})

        response = self.client.get("/api/v1/donations")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["message"], "Supplies donation retrieved successfully")
        self.assertEqual(len(payload["data"]), 4)
        self.assertTrue(all(isinstance(d["_id"], str) for d in payload["data"]))

    def test_list_is_empty_without_donations(self):
        self.assertEqual(self.client.get("/api/v1/donations").json()["data"], [])

    def test_body_must_be_an_object(self):
        response = self.client.post("/api/v1/donations", json=[1, 2, 3])
        self.assertEqual(response.status_code, 422)
        self.assertFalse(response.json()["success"])


class VolunteerApiTests(ApiTestCase):
    def test_create_volunteer(self):
        response = self.client.post(
            "/api/v1/volunteers",
            json={"name": "Grace", "phone": "555-0100", "availability": ["sat"]},
        )
        self.assertEqual(response.status_code, 201)
        payload = response.json()
        self.assertEqual(payload["message"], "Volunteer inserted successfully")
        stored = self.db.volunteers.find_one()
        self.assertEqual(stored["availability"], ["sat"])
        self.assertEqual(str(stored["_id"]), payload["data"]["insertedId"])

    def test_list_volunteers(self):
        self.client.post("/api/v1/volunteers", json={"name": "Grace"})
        self.client.post("/api/v1/volunteers", json={"name": "Linus"})

        response = self.client.get("/api/v1/volunteers")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            sorted(v["name"] for v in response.json()["data"]), ["Grace", "Linus"]
        )


if __name__ == "__main__":
    unittest.main()
