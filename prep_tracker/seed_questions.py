"""
Load the public past-question bank from a JSON file.

Run from project root: python -m prep_tracker.seed_questions questions.json [--replace]
The file holds a list of objects with company, question_text and optionally
role, answer, category, difficulty and year.
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Mapping

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from prep_tracker.app.core.logging_config import setup_logging
from prep_tracker.app.db.base import Base
from prep_tracker.app.db.session import SessionLocal, engine
from prep_tracker.app.models.past_question import PastQuestion
from prep_tracker.app.schemas.entities import PastQuestionCreate

import prep_tracker.app.models  # noqa: F401

logger = setup_logging()


def load_questions(db: Session, rows: Iterable[Mapping], replace: bool = False) -> int:
    """Validate and insert rows. Returns the number inserted. Nothing is written if any row is invalid."""
    questions = []
    for index, raw in enumerate(rows):
        try:
            questions.append(PastQuestionCreate.model_validate(raw))
        except SchemaValidationError as e:
            raise ValueError(f"row {index}: {e.errors()[0].get('msg')}") from e

    if replace:
        deleted = db.query(PastQuestion).delete(synchronize_session=False)
        logger.info("Removed %d existing questions", deleted)
    db.add_all(PastQuestion(**q.model_dump()) for q in questions)
    db.commit()
    return len(questions)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the past-question bank")
    parser.add_argument("path", type=Path, help="JSON file with a list of questions")
    parser.add_argument("--replace", action="store_true", help="delete existing questions first")
    args = parser.parse_args(argv)

    if not args.path.exists():
        logger.error("File not found: %s", args.path)
        return 1
    with args.path.open(encoding="utf-8") as fh:
        rows = json.load(fh)
    if not isinstance(rows, list):
        logger.error("Expected a JSON list of questions in %s", args.path)
        return 1

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        count = load_questions(db, rows, replace=args.replace)
    except ValueError as e:
        db.rollback()
        logger.error("Invalid question file %s: %s", args.path, e)
        return 1
    finally:
        db.close()
    logger.info("Loaded %d questions from %s", count, args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
