from bondcheck.matcher import filter_by_number, find_matches, summarise
from bondcheck.models import Bond, MatchResult, WinningBond
from bondcheck.readers import extract_six_digit_numbers


def _own(*numbers):
    return [Bond(number=n) for n in numbers]


def _winning(*numbers, prize="Prize Winner"):
    return [WinningBond(number=n, prize=prize) for n in numbers]


def test_matches_follow_own_list_order():
    own = _own("123456", "000111", "999999")
    winning = _winning(*extract_six_digit_numbers("...123456...999999 bonus 999999..."))

    assert find_matches(own, winning) == [
        MatchResult(bond_number="123456", prize="Prize Winner"),
        MatchResult(bond_number="999999", prize="Prize Winner"),
    ]


def test_order_is_not_taken_from_winning_list():
    own = _own("333333", "111111", "222222")
    winning = _winning("111111", "222222", "333333")
    assert [m.bond_number for m in find_matches(own, winning)] == ["333333", "111111", "222222"]


def test_leading_zeros_are_significant():
    assert find_matches(_own("012345"), _winning("12345")) == []
    assert find_matches(_own("12345"), _winning("012345")) == []


def test_matching_is_exact_string_equality():
    assert find_matches(_own("AB1234"), _winning("ab1234")) == []
    assert find_matches(_own("123456 "), _winning("123456")) == []


def test_empty_inputs_give_empty_result():
    assert find_matches([], _winning("123456")) == []
    assert find_matches(_own("123456"), []) == []
    assert find_matches([], []) == []


def test_no_intersection_gives_empty_result():
    assert find_matches(_own("111111"), _winning("222222")) == []


def test_duplicate_own_bonds_are_reported_each_time():
    own = _own("123456", "123456")
    assert len(find_matches(own, _winning("123456"))) == 2


def test_last_duplicate_winning_entry_wins():
    winning = [WinningBond("123456", "First"), WinningBond("123456", "Second")]
    assert find_matches(_own("123456"), winning)[0].prize == "Second"


def test_denomination_comes_from_own_bond():
    own = [Bond("123456", denomination=750.0)]
    winning = [WinningBond("123456", "First", denomination=1500.0)]
    assert find_matches(own, winning) == [MatchResult("123456", "First", 750.0)]


def test_filter_by_number():
    bonds = _own("123456", "234567", "999999")
    assert filter_by_number(bonds, "") == bonds
    assert filter_by_number(bonds, " 23 ") == bonds[:2]
    assert filter_by_number(bonds, "000") == []


def test_summarise():
    assert summarise([]).startswith("No winning bonds")
    assert summarise([MatchResult("123456", "x")]) == "You have 1 winning bond!"
    assert summarise([MatchResult("1", "x"), MatchResult("2", "x")]) == "You have 2 winning bonds!"
