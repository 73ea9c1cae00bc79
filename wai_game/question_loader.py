"""
Question bank loader from a text or CSV file
"""
import csv
import logging
from pathlib import Path
from typing import Dict, List


logger = logging.getLogger(__name__)


def load_questions(path_str: str) -> List[Dict]:
    """
    Load target answers for a bulk question import

    Text format (any extension except .csv), one target answer per line:
        더 나은 세상을 만드는 연결
        함께 성장하는 팀

    CSV format (header required, order optional):
        targetAnswer,order
        더 나은 세상을 만드는 연결,0
        함께 성장하는 팀,1

    Args:
        path_str: Path to the file

    Returns:
        List of {"target_answer", "order"} dicts ready for GameStore.set_questions

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a row is malformed or the file holds no questions
    """
    path = Path(path_str)

    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path_str}")

    if path.suffix.lower() == ".csv":
        questions = _load_csv(path)
    else:
        with open(path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        questions = [
            {"target_answer": text, "order": index}
            for index, text in enumerate(line for line in lines if line)
        ]

    if not questions:
        raise ValueError(f"No questions loaded from {path_str}")

    logger.info(f"✅ Loaded {len(questions)} questions from {path_str}")
    return questions


def _load_csv(path: Path) -> List[Dict]:
    questions = []
    with open(path, 'r', encoding='utf-8', newline='') as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            target = (row.get('targetAnswer') or row.get('target_answer') or '').strip()
            if not target:
                raise ValueError(f"Line {line_no}: targetAnswer is empty")

            order_str = (row.get('order') or '').strip()
            if order_str and not order_str.lstrip('-').isdigit():
                raise ValueError(f"Line {line_no}: order must be an integer, got {order_str}")

            questions.append({
                "target_answer": target,
                "order": int(order_str) if order_str else len(questions),
            })
    return questions
