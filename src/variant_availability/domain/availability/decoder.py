# 🧮 variant_availability/domain/availability/decoder.py
"""
🧮 Декодер рядка доступних комбінацій опцій.

Формат: цілі числа, розділені одним із чотирьох керуючих символів.

    ' '  — завершити поточну комбінацію (курсор) і видати її; глибина не змінюється.
    ':'  — перейти до наступної опції (depth + 1).
    ','  — видати курсор, відкинути останній слот; наступне число займає звільнений
           слот, префікс зберігається. Кожна наступна ',' поспіль нічого не видає
           і відкидає ще один слот (перехід до іншого префікса).
    '-'  — число перед ним стає нижньою межею діапазону [a, b), b — наступне число.
           Верхня межа b лише стає значенням курсора і не видається завершальним символом.

Приклади:
    "0-3 "    → [0], [1], [2]
    "0:0,1 "  → [0, 0], [0, 1]
    "1:2 "    → [1, 2]

🔹 Лояльний парсинг: порожній/нечисловий фрагмент → 0, помилок не піднімаємо.
🔹 Фрагмент без завершального керуючого символу ігнорується.
🔹 Кожна видана комбінація — окремий кортеж (знімок курсора).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                        # 🧾 Трасування декодування
import re                                                             # 🔍 Токенізація керуючих символів
from typing import FrozenSet, Iterable, List, Optional                # 🧰 Типи

# 🧩 Внутрішні модулі
from variant_availability.domain.options.entities import IndexVector  # 🔢 Тип комбінації
from variant_availability.shared.utils.logger import LOG_NAME         # 🏷️ Глобальний префікс логера


# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.availability.decoder")

CONTROL_CHARS = " :,-"                                                # 🎛️ Чотири керуючі символи
_TOKENIZER = re.compile(r"[ :,\-]")                                   # 🔍 Будь-який із керуючих символів
_LEADING_INT = re.compile(r"[ \t]*([+-]?[0-9]+)")                     # 🔢 Ведуче ціле, лише ASCII-цифри

OP_RANGE = "-"
OP_DEPTH = ":"
OP_EMIT = " "
OP_SIBLING = ","


# ================================
# 🛠️ ХЕЛПЕРИ
# ================================
def parse_position(fragment: str) -> int:
    """
    Лояльно перетворює фрагмент між керуючими символами в ціле.

    Ведучі цифри враховуються ("12x" → 12), решта → 0.
    """
    match = _LEADING_INT.match(fragment)
    if match is None:
        return 0
    return int(match.group(1))


def _write(cursor: List[int], depth: int, value: int) -> None:
    """Записує значення у слот `depth`, розширюючи курсор за потреби."""
    if depth < 0:                                                     # 🕳️ Вироджений випадок (кома на нульовій глибині)
        return
    if depth < len(cursor):
        cursor[depth] = value
        return
    cursor.extend([0] * (depth - len(cursor)))
    cursor.append(value)


def canonical_key(indices: Iterable[int]) -> str:
    """Канонічний ключ комбінації для множини: числа через кому."""
    return ",".join(str(i) for i in indices)


# ================================
# 🧮 ДЕКОДЕР
# ================================
def decode_option_values(encoded: str) -> List[IndexVector]:
    """
    Розгортає закодований рядок у перелік комбінацій у порядку появи.

    Args:
        encoded: Рядок з API (`encodedVariantAvailability` / `encodedVariantExistence`).

    Returns:
        List[IndexVector]: комбінації як кортежі позицій значень.
    """
    options: List[IndexVector] = []
    cursor: List[int] = []
    depth = 0
    range_start: Optional[int] = None
    reopen = False                                                    # 🔁 Після ',' наступне число пишеться у звільнений слот
    index = 0

    for token in _TOKENIZER.finditer(encoded or ""):
        operation = token.group(0)
        prev = encoded[token.start() - 1] if token.start() > 0 else ""

        if operation == OP_SIBLING and prev == OP_SIBLING:            # ⬆️ Кожна додаткова ',' піднімає ще на рівень
            if cursor:
                cursor.pop()
            depth -= 1
            index = token.end()
            continue

        position = parse_position(encoded[index:token.start()])

        if reopen:
            depth += 1
            reopen = False

        expanded = range_start is not None
        if range_start is not None:                                   # ↔️ Розгортаємо відкладений діапазон [a, b)
            for value in range(range_start, position):
                _write(cursor, depth, value)
                if cursor:
                    options.append(tuple(cursor))
            range_start = None

        _write(cursor, depth, position)

        if operation == OP_RANGE:
            range_start = position
        elif operation == OP_DEPTH:
            depth += 1
        else:
            if not expanded and cursor:                               # верхня межа діапазону не видається, порожній вектор теж
                options.append(tuple(cursor))
            if operation == OP_SIBLING:
                if cursor:
                    cursor.pop()
                depth -= 1
                reopen = True

        index = token.end()

    logger.debug("🧮 decode_option_values | length=%d combinations=%d", len(encoded or ""), len(options))
    return options


def decode_to_set(encoded: str) -> FrozenSet[str]:
    """Декодує рядок у множину канонічних ключів (`"0,1"`, `"2,0"`, ...)."""
    return frozenset(canonical_key(vector) for vector in decode_option_values(encoded))


__all__ = [
    "CONTROL_CHARS",
    "canonical_key",
    "decode_option_values",
    "decode_to_set",
    "parse_position",
]
