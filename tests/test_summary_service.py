# -*- coding: utf-8 -*-

from __future__ import annotations

import importlib
import shutil
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest import mock

NOW = datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc)


def _days_ago(n: int, hour: int = 9) -> str:
    return (NOW - timedelta(days=n)).replace(hour=hour).isoformat()


class TestSummaryService(unittest.TestCase):
    def setUp(self) -> None:
        self.config = importlib.import_module("fitlife.config")
        app_db = importlib.import_module("fitlife.app_db")
        self.errors = importlib.import_module("fitlife.errors")
        self.users = importlib.import_module("fitlife.users.storage")
        self.service = importlib.import_module("fitlife.summary.service")
        self.nutrition = importlib.import_module("fitlife.nutrition.storage").nutrition_store
        self.workouts = importlib.import_module("fitlife.workouts.storage").workout_store

        self._tmp = Path(tempfile.mkdtemp(prefix="fitlife-test-"))
        self._orig_db = self.config.settings.app_db_path
        self.config.settings.app_db_path = self._tmp / "fitlife.db"
        app_db.init_app_db(self.config.settings.app_db_path)

        self.user = self.users.create_user(name="Sam", email="sam@example.com", password_hash="x", height=175)
        self.user_id = self.user["id"]

    def tearDown(self) -> None:
        self.config.settings.app_db_path = self._orig_db
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_today_totals_and_entries(self) -> None:
        self.nutrition.create(self.user_id, {"food_name": "chicken", "calories": 165, "protein": 31, "fat": 3.6, "date": _days_ago(0, 8)})
        self.nutrition.create(self.user_id, {"food_name": "rice", "calories": 216, "protein": 5, "fat": 1.8, "carbs": 45, "date": _days_ago(0, 12)})
        self.nutrition.create(self.user_id, {"food_name": "yesterday", "calories": 999, "date": _days_ago(1)})

        today = self.service.today_nutrition(self.user_id, now=NOW)
        self.assertEqual(today.date, "2026-10-19")
        self.assertEqual(today.count, 2)
        self.assertEqual(today.totals.calories, 381)
        self.assertEqual(today.totals.protein, 36)
        self.assertAlmostEqual(today.totals.fat, 5.4, places=9)
        self.assertEqual(today.totals.carbs, 45)
        self.assertEqual([e.food_name for e in today.entries], ["rice", "chicken"])

    def test_nutrition_summary_window(self) -> None:
        self.nutrition.create(self.user_id, {"food_name": "a", "calories": 100, "date": _days_ago(0)})
        self.nutrition.create(self.user_id, {"food_name": "b", "calories": 200, "date": _days_ago(0, 18)})
        self.nutrition.create(self.user_id, {"food_name": "c", "calories": 300, "date": _days_ago(7)})
        self.nutrition.create(self.user_id, {"food_name": "too old", "calories": 400, "date": _days_ago(8)})

        days = self.service.nutrition_summary(self.user_id, 7, now=NOW)
        self.assertEqual([d.date for d in days], ["2026-10-12", "2026-10-19"])
        self.assertEqual(days[1].total_calories, 300)
        self.assertEqual(days[1].meal_count, 2)

    def test_rolling_windows_include_future_dated_entries(self) -> None:
        self.nutrition.create(self.user_id, {"food_name": "planned", "calories": 500, "date": "2026-10-20T09:00:00Z"})
        self.workouts.create(self.user_id, {"exercise_name": "race", "duration": 45, "date": "2026-10-25T09:00:00Z"})
        self.service.record_progress(self.user, {"weight": 78, "date": _days_ago(3)})
        self.service.record_progress(self.user, {"weight": 77.5, "date": "2026-10-21T07:00:00Z"})

        (meals,) = self.service.nutrition_summary(self.user_id, 7, now=NOW)
        self.assertEqual((meals.date, meals.total_calories), ("2026-10-20", 500))
        (workouts,) = self.service.workout_summary(self.user_id, 7, now=NOW)
        self.assertEqual(workouts.date, "2026-10-25")
        weekly = self.service.progress_summary(self.user_id, "weekly", now=NOW)
        self.assertEqual((weekly.entries, weekly.end_weight, weekly.weight_change), (2, 77.5, -0.5))

    def test_workout_summary_collects_distinct_muscles(self) -> None:
        for muscle in ("legs", "legs", "back"):
            self.workouts.create(
                self.user_id,
                {"exercise_name": "lift", "muscle": muscle, "duration": 20, "calories_burned": 100, "date": _days_ago(2)},
            )
        (day,) = self.service.workout_summary(self.user_id, 7, now=NOW)
        self.assertEqual(day.workout_count, 3)
        self.assertEqual(day.total_duration, 60)
        self.assertEqual(day.muscles, ["back", "legs"])

    def test_weekly_progress_summary(self) -> None:
        for offset, weight in zip(range(6, 0, -1), [80, 79.5, 79, 78.2, 77.8, 77]):
            self.service.record_progress(self.user, {"weight": weight, "date": _days_ago(offset)})
        self.service.record_progress(self.user, {"weight": 90, "date": _days_ago(20)})

        weekly = self.service.progress_summary(self.user_id, "weekly", now=NOW)
        self.assertEqual(weekly.period, "weekly")
        self.assertEqual(weekly.entries, 6)
        self.assertEqual(weekly.start_weight, 80)
        self.assertEqual(weekly.end_weight, 77)
        self.assertEqual(weekly.weight_change, -3.0)

        monthly = self.service.progress_summary(self.user_id, "monthly", now=NOW)
        self.assertEqual(monthly.entries, 7)
        self.assertEqual(monthly.start_weight, 90)

    def test_unknown_period_rejected(self) -> None:
        with self.assertRaises(self.errors.ValidationError):
            self.service.progress_summary(self.user_id, "yearly", now=NOW)

    def test_bmi_snapshot_survives_height_change(self) -> None:
        entry = self.service.record_progress(self.user, {"weight": 70, "bmi": 1.0})
        self.assertEqual(entry.bmi, 22.9)

        self.users.update_profile(self.user_id, {"height": 160})
        store = importlib.import_module("fitlife.progress.storage").progress_store
        self.assertEqual(store.find_one_owned(entry.id, self.user_id).bmi, 22.9)

    def test_bmi_defaults_height(self) -> None:
        self.assertEqual(self.service.bmi_for_user({"height": None}, 70), 24.2)

    def test_dashboard_degrades_failed_parts(self) -> None:
        self.nutrition.create(self.user_id, {"food_name": "oats", "calories": 150, "date": _days_ago(0)})
        self.service.record_progress(self.user, {"weight": 75, "date": _days_ago(1)})

        with mock.patch.object(self.service, "workout_summary", side_effect=RuntimeError("boom")):
            board = self.service.dashboard(self.user_id, now=NOW)

        self.assertEqual(board.workout_week, [])
        self.assertEqual(board.warnings, ["workout_week unavailable"])
        self.assertEqual(board.today.totals.calories, 150)
        self.assertEqual(board.latest_progress.weight, 75)
        self.assertEqual(board.progress_week.entries, 1)
        self.assertEqual(len(board.nutrition_week), 1)

    def test_dashboard_empty_user(self) -> None:
        board = self.service.dashboard(self.user_id, now=NOW)
        self.assertEqual(board.warnings, [])
        self.assertEqual(board.today.count, 0)
        self.assertIsNone(board.latest_progress)
        self.assertEqual(board.progress_week.entries, 0)


if __name__ == "__main__":
    unittest.main()
