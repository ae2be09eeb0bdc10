from blackjack_table.core.cards import Card, Rank, Suit
from blackjack_table.core.engine import GameConfig, RoundEngine, SessionStatus
from blackjack_table.core.errors import ErrorKind
from blackjack_table.core.game import RoundPhase, SessionState
from blackjack_table.core.presenter import Announcement
from blackjack_table.core.rules import RoundOutcome


class StackedShuffle:
    """Stands in for random.Random so the shoe deals cards in a fixed order."""

    def __init__(self, *deals):
        self.deals = list(deals)

    def shuffle(self, cards):
        order = self.deals.pop(0) if self.deals else []
        rest = [card for card in cards if card not in order]
        cards[:] = rest + list(reversed(order))


class ScriptedPresenter:
    def __init__(self, bets, answers):
        self.bets = list(bets)
        self.answers = list(answers)
        self.events = []
        self.prompts = []
        self.hands = []
        self.errors = []

    def display_hand(self, label, cards):
        self.hands.append((label, tuple(cards)))

    def display_hand_value(self, label, value):
        self.hands.append((label, value))

    def display_chips(self, kind, amount):
        self.events.append((kind, amount))

    def prompt_bet(self, minimum, maximum):
        self.prompts.append(("bet", minimum, maximum))
        return self.bets.pop(0)

    def prompt_yes_no(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def announce(self, event):
        self.events.append(event)

    def display_error(self, message):
        self.errors.append(message)


def cards(*ranks):
    return [Card(rank, suit) for rank, suit in zip(ranks, [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS] * 3)]


def deal(player, dealer, player_hits=()):
    """Shoe order for two player cards, two dealer cards, then later draws."""

    return player[:2] + dealer[:2] + list(player_hits) + dealer[2:]


def engine_for(shoe, bets, answers, **config):
    presenter = ScriptedPresenter(bets, answers)
    engine = RoundEngine(presenter, GameConfig(**config), rng=StackedShuffle(shoe))
    return engine, presenter


def test_player_twenty_beats_dealer_seventeen():
    player = cards(Rank.KING, Rank.QUEEN)
    dealer = [Card(Rank.SEVEN, Suit.CLUBS), Card(Rank.TEN, Suit.CLUBS)]
    engine, presenter = engine_for(deal(player, dealer), [10], [False, False])

    result = engine.run_session()

    assert result.status is SessionStatus.COMPLETED
    assert result.rounds[0].outcome is RoundOutcome.WIN
    assert result.rounds[0].player_value == 20
    assert result.rounds[0].dealer_value == 17
    assert result.chips == 110
    assert result.stats.wins == 1
    assert presenter.events[-1] is Announcement.GOODBYE


def test_player_bust_skips_dealer_turn():
    player = [Card(Rank.TEN, Suit.SPADES), Card(Rank.SIX, Suit.SPADES)]
    dealer = [Card(Rank.NINE, Suit.HEARTS), Card(Rank.EIGHT, Suit.HEARTS)]
    hit = [Card(Rank.SEVEN, Suit.CLUBS)]
    engine, presenter = engine_for(deal(player, dealer, hit), [5], [True, False])

    result = engine.run_session()

    round_result = result.rounds[0]
    assert round_result.outcome is RoundOutcome.LOSE
    assert round_result.player_value == 23
    assert not round_result.dealer_played
    assert result.chips == 95
    dealer_views = [entry for entry in presenter.hands if entry[0] == "Dealer" and isinstance(entry[1], tuple)]
    assert len(dealer_views) == 1
    assert len(dealer_views[0][1]) == 1


def test_equal_values_push():
    player = [Card(Rank.KING, Suit.SPADES), Card(Rank.NINE, Suit.SPADES)]
    dealer = [Card(Rank.KING, Suit.HEARTS), Card(Rank.NINE, Suit.HEARTS)]
    engine, _ = engine_for(deal(player, dealer), [30], [False, False])

    result = engine.run_session()

    assert result.rounds[0].outcome is RoundOutcome.PUSH
    assert result.chips == 100
    assert result.stats.pushes == 1


def test_twenty_one_ends_player_turn_but_dealer_still_plays():
    player = [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.SPADES)]
    dealer = [Card(Rank.FIVE, Suit.HEARTS), Card(Rank.SIX, Suit.HEARTS), Card(Rank.TEN, Suit.HEARTS)]
    engine, presenter = engine_for(deal(player, dealer), [10], [False])

    result = engine.run_session()

    round_result = result.rounds[0]
    assert round_result.dealer_played
    assert round_result.dealer_value == 21
    assert round_result.outcome is RoundOutcome.PUSH
    assert result.chips == 100
    # only the "another round" question was asked
    assert presenter.prompts[1:] == ["Would you like to play another round (y/n)?"]


def test_dealer_bust_pays_player():
    player = [Card(Rank.TEN, Suit.SPADES), Card(Rank.TWO, Suit.SPADES)]
    dealer = [Card(Rank.TEN, Suit.HEARTS), Card(Rank.SIX, Suit.HEARTS), Card(Rank.QUEEN, Suit.CLUBS)]
    engine, _ = engine_for(deal(player, dealer), [20], [False, False])

    result = engine.run_session()

    assert result.rounds[0].dealer_value == 26
    assert result.rounds[0].outcome is RoundOutcome.WIN
    assert result.chips == 120


def test_session_ends_when_chips_run_out():
    player = [Card(Rank.TEN, Suit.SPADES), Card(Rank.SEVEN, Suit.SPADES)]
    dealer = [Card(Rank.TEN, Suit.HEARTS), Card(Rank.NINE, Suit.HEARTS)]
    engine, presenter = engine_for(deal(player, dealer), [10], [False], starting_chips=10)

    result = engine.run_session()

    assert result.chips == 0
    assert len(result.rounds) == 1
    assert "Would you like to play another round (y/n)?" not in presenter.prompts
    assert presenter.events[-2:] == [Announcement.OUT_OF_CHIPS, Announcement.GOODBYE]


def test_session_without_chips_never_deals():
    engine, presenter = engine_for([], [], [], starting_chips=0)

    result = engine.run_session()

    assert result.rounds == []
    assert presenter.prompts == []
    assert presenter.events == [Announcement.WELCOME, Announcement.OUT_OF_CHIPS, Announcement.GOODBYE]


def test_second_round_uses_a_fresh_shoe():
    first = deal([Card(Rank.KING, Suit.SPADES), Card(Rank.NINE, Suit.SPADES)],
                 [Card(Rank.KING, Suit.HEARTS), Card(Rank.SEVEN, Suit.HEARTS)])
    second = deal([Card(Rank.KING, Suit.SPADES), Card(Rank.SIX, Suit.SPADES)],
                  [Card(Rank.KING, Suit.HEARTS), Card(Rank.EIGHT, Suit.HEARTS)])
    presenter = ScriptedPresenter([10, 10], [False, True, False, False])
    engine = RoundEngine(presenter, GameConfig(), rng=StackedShuffle(first, second))

    result = engine.run_session()

    assert [r.outcome for r in result.rounds] == [RoundOutcome.WIN, RoundOutcome.LOSE]
    assert result.chips == 100
    assert result.stats.rounds == 2
    assert result.stats.best_streak == 1
    assert result.stats.current_streak == -1
    assert engine.state.deck.is_empty()
    assert engine.state.phase is RoundPhase.CLEANUP


def test_invalid_bet_aborts_session():
    engine, presenter = engine_for([], [500], [])

    result = engine.run_session()

    assert result.status is SessionStatus.ABORTED
    assert result.error.kind is ErrorKind.INSUFFICIENT_CHIPS
    assert result.chips == 100
    assert presenter.errors == ["Error: player is trying to bet more than their available chips."]


def test_empty_shoe_is_reshuffled_mid_round():
    state = SessionState.new(100)
    state.start_round(10)
    state.deck.clear()

    state.deal_to_player()

    assert state.player.hand.card_count() == 1
    assert state.deck.size() == 51


def test_bet_prompt_is_bounded_by_available_chips():
    player = [Card(Rank.KING, Suit.SPADES), Card(Rank.NINE, Suit.SPADES)]
    dealer = [Card(Rank.KING, Suit.HEARTS), Card(Rank.NINE, Suit.HEARTS)]
    engine, presenter = engine_for(deal(player, dealer), [10], [False, False], starting_chips=40)

    engine.run_session()

    assert presenter.prompts[0] == ("bet", 1, 40)
