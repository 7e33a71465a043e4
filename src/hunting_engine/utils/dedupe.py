from typing import Iterable, List


def dedupe_keep_order(names: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for name in names or []:
        if not name:
            continue
        if name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out


def take(items: List[str], n: int) -> List[str]:
    return (items or [])[: max(0, n)]
