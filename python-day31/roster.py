"""
Day31: 名簿（roster）を「判定関数」で絞り込んで表示する

狙い：
- 判定ロジックを「外から渡す関数（コールバック）」として扱う
- 判定役の形を2通り用意して、絞り込み関数は1つだけ書く
  - CheckPerson: test(p) を1つだけ持つ独自の形（Protocol）
  - Predicate[T]: 汎用の述語。and_ / or_ / negate で組み合わせられる
- 絞り込み（純粋計算）と表示（stdout）を分ける

デフォルトの実行結果（引数なし）：
    Using CheckPerson Functional Interface:
    Bob (MALE, 19 years)
    Charlie (MALE, 25 years)

    Using Predicate<Person> Functional Interface:
    Bob (MALE, 19 years)
    Charlie (MALE, 25 years)

名簿も条件（MALE かつ 18〜25歳）も固定。--json / --verbose は表示とログだけを変える。
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Protocol, TextIO, TypeVar, Union

import toolkit

LOGGER_NAME = "roster"

INTERFACE_CHECK_PERSON = "CheckPerson"
INTERFACE_PREDICATE = "Predicate<Person>"

T = TypeVar("T")


# -------------------------
# データモデル
# -------------------------


class Gender(Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


@dataclass(frozen=True)
class Person:
    """
    名簿の1人分。作ったあとは変更できない（frozen）。

    name が空、age が負でもエラーにはしない（ここでは検証しない）。
    """

    name: str
    age: int
    gender: Gender

    def __str__(self) -> str:
        return f"{self.name} ({self.gender.name}, {self.age} years)"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "age": self.age, "gender": self.gender.name}


def build_roster() -> list[Person]:
    """サンプルの名簿（5人、この順番）を毎回新しく作って返す。"""
    return [
        Person("Alice", 22, Gender.FEMALE),
        Person("Bob", 19, Gender.MALE),
        Person("Charlie", 25, Gender.MALE),
        Person("David", 30, Gender.MALE),
        Person("Eve", 18, Gender.FEMALE),
    ]


# -------------------------
# 判定役（2つの形）
# -------------------------


class CheckPerson(Protocol):
    """test(p) を1つだけ持つ判定役。継承しなくても、メソッドがあれば満たす。"""

    def test(self, p: Person) -> bool: ...


@dataclass(frozen=True)
class Predicate(Generic[T]):
    """
    汎用の述語。関数を1つ包んで test(value) で呼べるようにする。

    - 自分自身も呼び出し可能（__call__）なので、普通の関数と同じ場所で使える
    - and_ / or_ の相手は Predicate でも普通の関数でもよい
    - 短絡評価：and_ は左が False なら右を呼ばない（or_ は左が True なら）
    """

    fn: Callable[[T], bool]

    def test(self, value: T) -> bool:
        return bool(self.fn(value))

    def __call__(self, value: T) -> bool:
        return self.test(value)

    def and_(self, other: Callable[[T], bool]) -> Predicate[T]:
        return Predicate(lambda v: self.test(v) and bool(other(v)))

    def or_(self, other: Callable[[T], bool]) -> Predicate[T]:
        return Predicate(lambda v: self.test(v) or bool(other(v)))

    def negate(self) -> Predicate[T]:
        return Predicate(lambda v: not self.test(v))


@dataclass(frozen=True)
class Criteria:
    """
    「性別が一致 かつ min_age <= age <= max_age」という条件。

    test() を持つので CheckPerson としてそのまま渡せる。
    as_predicate() は同じ条件を Predicate の合成で組み立てたもの。
    """

    gender: Gender = Gender.MALE
    min_age: int = 18
    max_age: int = 25

    def test(self, p: Person) -> bool:
        return p.gender is self.gender and self.min_age <= p.age <= self.max_age

    def as_predicate(self) -> Predicate[Person]:
        same_gender: Predicate[Person] = Predicate(lambda p: p.gender is self.gender)
        return same_gender.and_(lambda p: self.min_age <= p.age <= self.max_age)

    def to_dict(self) -> dict[str, Any]:
        return {"gender": self.gender.name, "min_age": self.min_age, "max_age": self.max_age}


Tester = Union[CheckPerson, Callable[[Person], bool]]


# -------------------------
# 絞り込み（コアロジック）
# -------------------------


def resolve_tester(tester: Tester) -> Callable[[Person], bool]:
    """
    判定役を「Person -> bool の関数」にそろえる。

    - test メソッドを持っていればそれを使う（CheckPerson / Predicate）
    - なければ、呼び出し可能ならそのまま使う（lambda など）
    - None やどちらでもないものは TypeError（黙って「0件」にはしない）
    """
    if tester is None:
        raise TypeError("tester must not be None")
    test = getattr(tester, "test", None)
    if callable(test):
        return test
    if callable(tester):
        return tester
    raise TypeError(f"tester must be callable or have test(p): {type(tester).__name__}")


def filter_persons(roster: Iterable[Person], tester: Tester) -> list[Person]:
    """判定が True の人だけを、名簿の順番のまま返す。roster 自体は変更しない。"""
    if roster is None:
        raise TypeError("roster must not be None")
    check = resolve_tester(tester)
    return [p for p in roster if check(p)]


def print_persons(roster: Iterable[Person], tester: Tester, out: TextIO | None = None) -> None:
    """判定が True の人を1行ずつ表示する。該当なしなら何も出さない。"""
    stream = out if out is not None else sys.stdout
    for p in filter_persons(roster, tester):
        print(p, file=stream)


# -------------------------
# CLI / 出力（I/O境界）
# -------------------------


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    CLI引数を解析する。

    どのフラグも「表示の仕方」と「stderr ログ」だけを変える。
    絞り込み条件（MALE かつ 18〜25歳）と名簿は固定。
    """
    parser = argparse.ArgumentParser(
        description="Filter a sample roster with predicate callbacks and print matches.",
        allow_abbrev=False,
    )
    parser.add_argument("--json", action="store_true", help="結果をJSONでstdoutに出す")
    parser.add_argument("--verbose", action="store_true", help="詳細ログをstderrに出す")
    return parser.parse_args(argv)


def build_json_payload(criteria: Criteria, roster_size: int, runs: list[tuple[str, list[Person]]]) -> dict[str, Any]:
    return {
        "criteria": criteria.to_dict(),
        "roster_size": roster_size,
        "runs": [{"interface": label, "matches": [p.to_dict() for p in matches]} for label, matches in runs],
    }


def main(argv: list[str] | None = None) -> int:
    """
    実行入口（テストからも呼べる形）。常に 0 を返す。

    同じ条件を2つの形（Criteria そのもの / Predicate の合成）で渡して、
    それぞれ見出し付きで表示する。
    """
    args = parse_args(argv)
    logger = toolkit.setup_logger(LOGGER_NAME, args.verbose)

    criteria = Criteria()
    people = build_roster()
    logger.info(
        "roster: %d persons, criteria: gender=%s age=%d..%d",
        len(people),
        criteria.gender.name,
        criteria.min_age,
        criteria.max_age,
    )

    testers: list[tuple[str, Tester]] = [
        (INTERFACE_CHECK_PERSON, criteria),
        (INTERFACE_PREDICATE, criteria.as_predicate()),
    ]

    if args.json:
        runs = [(label, filter_persons(people, tester)) for label, tester in testers]
        print(json.dumps(build_json_payload(criteria, len(people), runs), ensure_ascii=False, indent=2))
        return 0

    for i, (label, tester) in enumerate(testers):
        if i > 0:
            print()
        print(f"Using {label} Functional Interface:")
        print_persons(people, tester)
        logger.info("%s: done", label)

    return 0
