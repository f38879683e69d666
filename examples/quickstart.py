from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from dataclasses import replace

    from option_greeks import (
        OptionParameters,
        OptionSide,
        PricingMode,
        price,
        price_option,
    )

    p = OptionParameters(
        side=OptionSide.CALL,
        spot=100.0,
        strike=100.0,
        time_to_maturity=1.0,
        volatility=0.20,
        risk_free_rate=0.05,
        dividend_yield=0.0,
    )

    print("Continuous:", price(p).as_dict())
    print("Discrete:", price(replace(p, mode=PricingMode.DISCRETE)).as_dict())

    # same contract from plain strings
    res = price_option(
        side="put",
        spot=100.0,
        strike=100.0,
        time_to_maturity=1.0,
        volatility=0.20,
        risk_free_rate=0.05,
        mode="continuous",
    )
    print("Put:", res.as_dict())
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
