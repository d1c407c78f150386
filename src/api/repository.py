"""In-memory lesson schedule storage for the development API."""

from datetime import datetime
from itertools import count

from models.events import LessonSchedulePayload, LessonScheduleRecord


class InMemoryLessonScheduleRepository:
    """Lesson schedules keyed by id, in insertion order."""

    def __init__(self, records: list[LessonScheduleRecord] | None = None):
        self._records: dict[int, LessonScheduleRecord] = {}
        for record in records or []:
            self._records[record.id] = record
        self._ids = count(max(self._records, default=0) + 1)

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> list[LessonScheduleRecord]:
        return list(self._records.values())

    def get(self, schedule_id: int) -> LessonScheduleRecord | None:
        return self._records.get(schedule_id)

    def create(self, payload: LessonSchedulePayload) -> LessonScheduleRecord:
        record = LessonScheduleRecord(id=next(self._ids), **payload.model_dump())
        self._records[record.id] = record
        return record

    def update(self, schedule_id: int, payload: LessonSchedulePayload) -> LessonScheduleRecord | None:
        if schedule_id not in self._records:
            return None
        record = LessonScheduleRecord(id=schedule_id, **payload.model_dump())
        self._records[schedule_id] = record
        return record

    def delete(self, schedule_id: int) -> bool:
        return self._records.pop(schedule_id, None) is not None


def sample_records() -> list[LessonScheduleRecord]:
    """Sample lessons for May/June 2025."""
    return [
        LessonScheduleRecord(
            id=1,
            title="生徒Aとの面談",
            start_time=datetime(2025, 5, 25, 10, 0),
            end_time=datetime(2025, 5, 25, 11, 0),
            description="来学期の学習計画について",
            color="#FFDDC1",
        ),
        LessonScheduleRecord(
            id=2,
            title="全体講師ミーティング",
            start_time=datetime(2025, 5, 28, 14, 0),
            end_time=datetime(2025, 5, 28, 15, 30),
            description="新カリキュラムに関する情報共有",
            color="#C1E1FF",
        ),
        LessonScheduleRecord(
            id=3,
            title="個別指導（生徒B）",
            start_time=datetime(2025, 5, 29, 16, 0),
            end_time=datetime(2025, 5, 29, 17, 0),
            description="数学の二次関数",
            color="#D4FFC1",
        ),
        LessonScheduleRecord(
            id=4,
            title="資料作成締め切り",
            start_time=datetime(2025, 6, 1, 9, 0),
            end_time=datetime(2025, 6, 1, 17, 0),
            description="来月の教材準備",
            color="#FFC1C1",
        ),
    ]
