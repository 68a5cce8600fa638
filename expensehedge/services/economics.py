"""Closed-form hedge economics for YES shares on a binary market.

A winning share pays 1 at settlement minus the market fee, so every formula
below works with ``payout = 1 - fee_rate``. Inputs are not validated: inverted
scenarios (adverse below baseline) simply produce negative share counts.
"""

from expensehedge.models.hedge import ConsolationQuote, HedgeQuote
from expensehedge.models.scenario import HedgeMode, ScenarioParameters


def calculate_hedging(
    baseline_expense: float,
    adverse_expense: float,
    hedge_ratio: float,
    price: float,
    fee_rate: float = 0.01,
) -> HedgeQuote:
    """Hedge part of the extra cost of a recurring expense.

    Args:
        baseline_expense: Expense per period when the event does not occur.
        adverse_expense: Expense per period when the event occurs.
        hedge_ratio: Fraction of the additional expense to cover (0-1).
        price: YES share price (0-1).
        fee_rate: Fraction of the payout retained by the market.
    """
    payout = 1 - fee_rate
    additional_expense = adverse_expense - baseline_expense

    shares = additional_expense * hedge_ratio / payout
    premium = shares * price

    return HedgeQuote(
        shares=shares,
        premium=premium,
        hedged_outcome_if_event_true=-adverse_expense - premium + shares * payout,
        hedged_outcome_if_event_false=-baseline_expense - premium,
        unhedged_outcome_if_event_true=-adverse_expense,
        unhedged_outcome_if_event_false=-baseline_expense,
    )


def calculate_emotional_hedging(
    entry_cost: float,
    desired_consolation: float,
    hedge_ratio: float,
    price: float,
    fee_rate: float = 0.01,
) -> ConsolationQuote:
    """Buy a consolation payout that only arrives if a single event goes badly.

    The entry cost (a ticket, a bet on your own team) is sunk either way, so
    the unhedged outcome is the same for both events.
    """
    payout = 1 - fee_rate
    target_consolation = desired_consolation * hedge_ratio

    shares = target_consolation / payout
    premium = shares * price

    return ConsolationQuote(
        shares=shares,
        premium=premium,
        outcome_if_adverse_event=-entry_cost + shares * payout - premium,
        outcome_if_favorable_event=-entry_cost - premium,
        unhedged_outcome_if_adverse_event=-entry_cost,
        unhedged_outcome_if_favorable_event=-entry_cost,
    )


def quote_scenario(scenario: ScenarioParameters, hedge_ratio: float) -> HedgeQuote | ConsolationQuote:
    """Quote a scenario with the payoff algebra of its mode."""
    if scenario.mode == HedgeMode.CONSOLATION:
        return calculate_emotional_hedging(
            scenario.baseline_value,
            scenario.adverse_value,
            hedge_ratio,
            scenario.share_price,
            scenario.fee_rate,
        )
    return calculate_hedging(
        scenario.baseline_value,
        scenario.adverse_value,
        hedge_ratio,
        scenario.share_price,
        scenario.fee_rate,
    )


def outcome_branches(quote: HedgeQuote | ConsolationQuote) -> tuple[float, float, float, float]:
    """(hedged if event, hedged if no event, unhedged if event, unhedged if no event)."""
    if isinstance(quote, ConsolationQuote):
        return (
            quote.outcome_if_adverse_event,
            quote.outcome_if_favorable_event,
            quote.unhedged_outcome_if_adverse_event,
            quote.unhedged_outcome_if_favorable_event,
        )
    return (
        quote.hedged_outcome_if_event_true,
        quote.hedged_outcome_if_event_false,
        quote.unhedged_outcome_if_event_true,
        quote.unhedged_outcome_if_event_false,
    )
