"""Tests for trick resolution and the legality engine (including running away)."""
from schafkopf.contracts import RAMSCH, WENZ, call, solo
from schafkopf.deck import Card, Hand, Rank, Suit
from schafkopf.play import (
    PlayedCard,
    action_is_valid,
    can_run,
    compare_cards,
    determine_trick_winner,
    is_running_lead,
    legal_plays,
    next_player_after,
    player_is_called,
    trick_winner,
)

A, L, H, B = Suit.ACORNS, Suit.LEAVES, Suit.HEARTS, Suit.BELLS
CALL_ACORNS = call(A)


def c(suit, rank):
    return Card(suit, rank)


def trick(*cards, first=0):
    return [PlayedCard(card, (first + i) % 4) for i, card in enumerate(cards)]


# ---- ranking ----


def test_trump_beats_plain_card():
    assert compare_cards(c(H, Rank.SEVEN), c(A, Rank.ACE), CALL_ACORNS, A) == 1
    assert compare_cards(c(A, Rank.ACE), c(H, Rank.SEVEN), CALL_ACORNS, A) == -1


def test_trumps_compare_rank_then_suit():
    assert compare_cards(c(A, Rank.OBER), c(B, Rank.OBER), CALL_ACORNS, B) == 1
    assert compare_cards(c(B, Rank.OBER), c(A, Rank.UNDER), CALL_ACORNS, B) == 1
    assert compare_cards(c(H, Rank.NINE), c(H, Rank.EIGHT), CALL_ACORNS, B) == 1


def test_plain_cards_led_suit_wins():
    assert compare_cards(c(B, Rank.SEVEN), c(A, Rank.ACE), CALL_ACORNS, B) == 1
    assert compare_cards(c(B, Rank.TEN), c(B, Rank.KING), CALL_ACORNS, B) == 1
    assert compare_cards(c(L, Rank.ACE), c(A, Rank.ACE), CALL_ACORNS, B) == 0


def test_trick_winner_highest_of_led_suit():
    t = trick(c(A, Rank.SEVEN), c(A, Rank.ACE), c(B, Rank.ACE), c(A, Rank.TEN))
    assert trick_winner(t, CALL_ACORNS) == 1


def test_trick_winner_trump_cuts():
    t = trick(c(A, Rank.SEVEN), c(A, Rank.ACE), c(B, Rank.ACE), c(H, Rank.SEVEN))
    assert trick_winner(t, CALL_ACORNS) == 3


def test_trick_winner_wenz_only_unders_trump():
    t = trick(c(L, Rank.KING), c(L, Rank.OBER), c(B, Rank.UNDER), c(A, Rank.UNDER), first=2)
    assert trick_winner(t, WENZ) == 1  # Acorns Under, played by seat (2 + 3) % 4
    t = trick(c(L, Rank.KING), c(L, Rank.OBER), c(H, Rank.ACE), c(B, Rank.SEVEN))
    assert trick_winner(t, WENZ) == 1


def test_trick_winner_solo_suit():
    contract = solo(L)
    t = trick(c(A, Rank.ACE), c(L, Rank.SEVEN), c(A, Rank.TEN), c(H, Rank.ACE))
    assert trick_winner(t, contract) == 1


def test_determine_trick_winner_incomplete_is_none():
    played = trick(c(A, Rank.SEVEN), c(A, Rank.ACE), c(B, Rank.ACE))
    assert determine_trick_winner(played, 0, CALL_ACORNS) is None
    assert determine_trick_winner(played, 1, CALL_ACORNS) is None


def test_determine_trick_winner_second_trick():
    played = trick(c(A, Rank.SEVEN), c(A, Rank.ACE), c(B, Rank.ACE), c(A, Rank.TEN))
    played += trick(c(B, Rank.SEVEN), c(B, Rank.EIGHT), c(B, Rank.NINE), c(B, Rank.KING), first=1)
    assert determine_trick_winner(played, 0, RAMSCH) == 1
    assert determine_trick_winner(played, 1, RAMSCH) == 0


def test_next_player_after():
    played = trick(c(A, Rank.SEVEN), c(A, Rank.ACE), c(B, Rank.ACE))
    assert next_player_after(played, 2, CALL_ACORNS) == 3
    played = trick(c(A, Rank.SEVEN), c(A, Rank.ACE), c(B, Rank.ACE), c(A, Rank.TEN))
    assert next_player_after(played, 3, CALL_ACORNS) == 1


# ---- legality: leading ----


def partner_hand_three_acorns():
    return Hand(cards=[
        c(A, Rank.ACE), c(A, Rank.SEVEN), c(A, Rank.EIGHT),
        c(B, Rank.KING), c(L, Rank.NINE), c(H, Rank.SEVEN),
        c(B, Rank.OBER), c(L, Rank.UNDER),
    ])


def partner_hand_four_acorns():
    return Hand(cards=[
        c(A, Rank.ACE), c(A, Rank.SEVEN), c(A, Rank.EIGHT), c(A, Rank.NINE),
        c(B, Rank.KING), c(L, Rank.NINE), c(H, Rank.SEVEN), c(B, Rank.OBER),
    ])


def test_partner_may_not_lead_called_suit_without_running():
    hand = partner_hand_three_acorns()
    assert not action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.ACE), hand)
    assert not action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.SEVEN), hand)
    assert action_is_valid(CALL_ACORNS, [], 0, c(B, Rank.KING), hand)
    assert action_is_valid(CALL_ACORNS, [], 0, c(H, Rank.SEVEN), hand)
    legal = legal_plays(CALL_ACORNS, [], 0, hand)
    assert set(legal) == set(hand.cards) - {c(A, Rank.ACE), c(A, Rank.SEVEN), c(A, Rank.EIGHT)}


def test_partner_with_four_of_called_suit_can_run():
    hand = partner_hand_four_acorns()
    assert can_run(CALL_ACORNS, c(A, Rank.SEVEN), hand)
    assert action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.SEVEN), hand)
    assert not action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.ACE), hand)
    assert is_running_lead(CALL_ACORNS, [], 0, c(A, Rank.SEVEN), hand)
    assert not is_running_lead(CALL_ACORNS, [], 0, c(B, Rank.KING), hand)


def test_can_run_counts_ober_of_called_suit():
    hand = Hand(cards=[
        c(A, Rank.ACE), c(A, Rank.SEVEN), c(A, Rank.EIGHT), c(A, Rank.OBER), c(B, Rank.KING),
    ])
    assert can_run(CALL_ACORNS, c(A, Rank.SEVEN), hand)
    assert can_run(CALL_ACORNS, c(A, Rank.OBER), hand)
    assert player_is_called(CALL_ACORNS, c(A, Rank.OBER), hand)
    assert is_running_lead(CALL_ACORNS, [], 0, c(A, Rank.OBER), hand)


def test_partner_may_not_lead_ober_of_called_suit_without_running():
    hand = partner_hand_three_acorns()
    hand.cards[2] = c(A, Rank.OBER)
    assert not can_run(CALL_ACORNS, c(A, Rank.OBER), hand)
    assert not action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.OBER), hand)
    assert action_is_valid(CALL_ACORNS, [], 0, c(B, Rank.OBER), hand)


def test_partner_released_after_running():
    hand = partner_hand_three_acorns()
    assert action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.ACE), hand, ran_away=True)
    assert action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.SEVEN), hand, ran_away=True)


def test_non_partner_may_lead_called_suit():
    hand = Hand(cards=[c(A, Rank.SEVEN), c(A, Rank.KING), c(B, Rank.ACE)])
    assert not player_is_called(CALL_ACORNS, c(A, Rank.SEVEN), hand)
    assert action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.SEVEN), hand)


def test_partner_with_only_called_suit_left_may_lead_it():
    hand = Hand(cards=[c(A, Rank.ACE), c(A, Rank.SEVEN)])
    assert legal_plays(CALL_ACORNS, [], 0, hand) == hand.cards


def test_card_not_in_hand_is_not_valid():
    hand = Hand(cards=[c(B, Rank.SEVEN)])
    assert not action_is_valid(CALL_ACORNS, [], 0, c(B, Rank.EIGHT), hand)


def test_leading_anything_in_solo():
    hand = partner_hand_three_acorns()
    assert legal_plays(solo(A), [], 0, hand) == hand.cards


# ---- legality: following ----


def test_called_suit_led_forces_the_ace():
    played = trick(c(A, Rank.KING))
    hand = partner_hand_four_acorns()
    assert legal_plays(CALL_ACORNS, played, 0, hand) == [c(A, Rank.ACE)]


def test_called_suit_led_after_running_follows_suit():
    played = trick(c(A, Rank.KING))
    hand = partner_hand_four_acorns()
    legal = legal_plays(CALL_ACORNS, played, 0, hand, ran_away=True)
    assert set(legal) == {c(A, Rank.ACE), c(A, Rank.SEVEN), c(A, Rank.EIGHT), c(A, Rank.NINE)}


def test_trump_led_must_play_trump():
    played = trick(c(H, Rank.NINE))
    hand = Hand(cards=[c(B, Rank.OBER), c(B, Rank.KING), c(A, Rank.SEVEN)])
    assert legal_plays(CALL_ACORNS, played, 0, hand) == [c(B, Rank.OBER)]


def test_trump_led_without_trump_follows_printed_suit():
    played = trick(c(L, Rank.OBER))
    hand = Hand(cards=[c(L, Rank.SEVEN), c(B, Rank.KING), c(A, Rank.ACE)])
    assert legal_plays(CALL_ACORNS, played, 0, hand) == [c(L, Rank.SEVEN)]
    hand = Hand(cards=[c(B, Rank.KING), c(A, Rank.SEVEN)])
    assert legal_plays(CALL_ACORNS, played, 0, hand) == hand.cards


def test_ober_of_called_suit_led_forces_the_ace_without_trump():
    played = trick(c(A, Rank.OBER))
    hand = Hand(cards=[c(A, Rank.SEVEN), c(B, Rank.KING), c(A, Rank.ACE)])
    assert legal_plays(CALL_ACORNS, played, 0, hand) == [c(A, Rank.ACE)]


def test_must_follow_led_suit():
    played = trick(c(L, Rank.SEVEN))
    hand = Hand(cards=[c(L, Rank.TEN), c(L, Rank.UNDER), c(B, Rank.SEVEN)])
    assert legal_plays(CALL_ACORNS, played, 0, hand) == [c(L, Rank.TEN), c(L, Rank.UNDER)]


def test_under_follows_its_printed_suit():
    played = trick(c(L, Rank.SEVEN))
    hand = Hand(cards=[c(L, Rank.UNDER), c(B, Rank.SEVEN)])
    assert legal_plays(CALL_ACORNS, played, 0, hand) == [c(L, Rank.UNDER)]


def test_no_led_suit_anything_goes():
    played = trick(c(L, Rank.SEVEN))
    hand = Hand(cards=[c(H, Rank.UNDER), c(B, Rank.SEVEN)])
    assert legal_plays(CALL_ACORNS, played, 0, hand) == hand.cards


def test_wenz_ober_follows_its_suit():
    played = trick(c(L, Rank.SEVEN))
    hand = Hand(cards=[c(L, Rank.OBER), c(B, Rank.UNDER), c(B, Rank.SEVEN)])
    assert legal_plays(WENZ, played, 0, hand) == [c(L, Rank.OBER)]


# ---- legality without the hand ----


def test_hidden_hand_only_provably_valid_plays():
    assert not action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.SEVEN), None)
    assert action_is_valid(CALL_ACORNS, [], 0, c(B, Rank.SEVEN), None)
    assert action_is_valid(CALL_ACORNS, [], 0, c(A, Rank.SEVEN), None, ran_away=True)
    assert action_is_valid(solo(A), [], 0, c(A, Rank.SEVEN), None)

    leaves_led = trick(c(L, Rank.SEVEN))
    assert action_is_valid(CALL_ACORNS, leaves_led, 0, c(L, Rank.KING), None)
    assert not action_is_valid(CALL_ACORNS, leaves_led, 0, c(B, Rank.KING), None)
    assert action_is_valid(CALL_ACORNS, leaves_led, 0, c(L, Rank.UNDER), None)
    assert not action_is_valid(CALL_ACORNS, leaves_led, 0, c(H, Rank.UNDER), None)

    trump_led = trick(c(H, Rank.NINE))
    assert action_is_valid(CALL_ACORNS, trump_led, 0, c(B, Rank.OBER), None)
    assert not action_is_valid(CALL_ACORNS, trump_led, 0, c(B, Rank.KING), None)

    acorns_led = trick(c(A, Rank.KING))
    assert action_is_valid(CALL_ACORNS, acorns_led, 0, c(A, Rank.ACE), None)
    assert not action_is_valid(CALL_ACORNS, acorns_led, 0, c(A, Rank.SEVEN), None)
