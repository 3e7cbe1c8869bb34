# 🔎 variant_availability/domain/availability/index_resolver.py
"""
🔎 Резолвер індексів: значення опцій (рядки) → позиції у каталозі.

🔹 Точна рівність рядків, перше входження.
🔹 Невідоме значення — жорстка помилка `ValueNotFoundError`, ніколи не підміна на 0.
🔹 Чиста функція без побічних ефектів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                        # 🧾 Трасування резолвінгу
from typing import List, Sequence                                     # 🧰 Типи

# 🧩 Внутрішні модулі
from variant_availability.domain.options.entities import (            # 📦 Сутності каталогу
    IndexVector,
    OptionCatalog,
)
from variant_availability.shared.errors import (                      # 🚨 Помилки резолвера
    CombinationShapeError,
    ValueNotFoundError,
)
from variant_availability.shared.utils.logger import LOG_NAME         # 🏷️ Глобальний префікс логера


# ================================
# 🧾 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.availability.index_resolver")


def resolve_indices(target_values: Sequence[str], catalog: OptionCatalog) -> IndexVector:
    """
    Повертає вектор індексів для цільової комбінації.

    Args:
        target_values: По одному значенню на кожну опцію, у порядку каталогу.
        catalog: Впорядкований перелік опцій товару.

    Returns:
        IndexVector: позиції значень у `catalog[i].values`.

    Raises:
        CombinationShapeError: довжина комбінації не дорівнює кількості опцій.
        ValueNotFoundError: значення відсутнє в каталозі відповідної опції.
    """
    if len(target_values) != len(catalog):                            # 📐 Передумова форми
        raise CombinationShapeError(expected=len(catalog), actual=len(target_values))

    indices: List[int] = []
    for position, (value, option) in enumerate(zip(target_values, catalog)):
        index = option.index_of(value)                                # 🔎 Точний пошук у значеннях опції
        if index is None:
            error = ValueNotFoundError(
                value,
                option_name=option.name,
                position=position,
                known_values=option.values,
            )
            logger.debug("❌ resolve_indices miss", extra=error.to_log_extra())
            raise error
        indices.append(index)

    resolved = tuple(indices)
    logger.debug("🔢 resolve_indices | values=%s indices=%s", list(target_values), resolved)
    return resolved


__all__ = ["resolve_indices"]
