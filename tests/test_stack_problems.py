import pytest

from algodrills.stack_problems import (
    baseball_score,
    daily_temperatures,
    decode_string,
    eval_rpn,
    is_valid_parentheses,
    make_good,
    reverse_parentheses,
)


def test_baseball_cancel_removes_score():
    assert baseball_score(["1", "C"]) == baseball_score([])


def test_baseball_double_matches_explicit_score():
    assert baseball_score(["4", "D"]) == baseball_score(["4", "8"])


def test_baseball_plus_matches_explicit_sum():
    assert baseball_score(["2", "3", "+"]) == baseball_score(["2", "3", "5"])


def test_baseball_plain_scores_add_up():
    assert baseball_score(["5", "-2", "4"]) == 5 - 2 + 4


@pytest.mark.parametrize("ops", [["+"], ["1", "+"], ["D"], ["C"], ["x"]])
def test_baseball_bad_operations(ops):
    with pytest.raises(ValueError):
        baseball_score(ops)


def test_decode_source_example():
    assert decode_string("2[abc]3[cd]ef") == "abc" * 2 + "cd" * 3 + "ef"


def test_decode_nested_repeats_inner_result():
    assert decode_string("2[a3[b]]") == decode_string("a3[b]") * 2


def test_decode_multi_digit_count():
    assert decode_string("12[x]") == "x" * 12


def test_decode_without_brackets_is_identity():
    assert decode_string("plain") == "plain"


@pytest.mark.parametrize("text", ["abc]", "[abc]"])
def test_decode_malformed(text):
    with pytest.raises(ValueError):
        decode_string(text)


def test_make_good_source_example():
    assert make_good("NAanorRoOrROwnTNW") == "wnTNW"


@pytest.mark.parametrize("text", ["leEeetcode", "abBAcC", "s", "aAbBcCdD", "xyzZYXq"])
def test_make_good_leaves_no_bad_pair(text):
    result = make_good(text)
    for a, b in zip(result, result[1:]):
        assert abs(ord(a) - ord(b)) != 32
    assert make_good(result) == result


def test_make_good_removes_full_cancellation():
    assert make_good("abBA") == ""


def test_eval_rpn_source_example():
    tokens = ["10", "6", "9", "3", "+", "-11", "*", "/", "*", "17", "+", "5", "+"]
    assert eval_rpn(tokens) == 22


def test_eval_rpn_operand_order():
    assert eval_rpn(["7", "2", "-"]) == 7 - 2
    assert eval_rpn(["8", "2", "/"]) == 8 // 2


def test_eval_rpn_division_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -(7 // 2)
    assert eval_rpn(["7", "-2", "/"]) == -(7 // 2)


def test_eval_rpn_errors():
    with pytest.raises(ValueError):
        eval_rpn(["1", "+"])
    with pytest.raises(ValueError):
        eval_rpn([])
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


def test_parentheses_source_example():
    assert is_valid_parentheses("[{[()[()]}]") is False


@pytest.mark.parametrize("text", ["", "()", "{[()]}", "()[]{}"])
def test_parentheses_valid(text):
    assert is_valid_parentheses(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "a"])
def test_parentheses_invalid(text):
    assert is_valid_parentheses(text) is False


def test_reverse_parentheses_source_example():
    assert reverse_parentheses("(ed(et(oc))el)") == "leetcode"


def test_reverse_parentheses_single_pair():
    assert reverse_parentheses("(abcd)") == "abcd"[::-1]


def test_reverse_parentheses_twice_restores():
    assert reverse_parentheses("((abc))") == "abc"


def test_reverse_parentheses_unmatched_close():
    with pytest.raises(ValueError):
        reverse_parentheses("ab)")


def test_daily_temperatures_source_example():
    assert daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73]) == [1, 1, 4, 2, 1, 1, 0, 0]


def test_daily_temperatures_falling_never_warms():
    assert daily_temperatures([5, 4, 3, 2]) == [0] * 4


def test_daily_temperatures_points_at_warmer_day():
    temps = [30, 40, 35, 50, 20, 60]
    for day, wait in enumerate(daily_temperatures(temps)):
        if wait:
            assert temps[day + wait] > temps[day]
            assert all(t <= temps[day] for t in temps[day + 1 : day + wait])
        else:
            assert all(t <= temps[day] for t in temps[day + 1 :])