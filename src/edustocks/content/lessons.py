"""Built-in lesson catalog."""

from edustocks.domain.models import Lesson, LessonLevel, Question

LESSONS: tuple[Lesson, ...] = (
    Lesson(
        id="lesson-1",
        title="What is a Stock?",
        description="Learn the basics of stocks and how they work",
        level=LessonLevel.BEGINNER,
        order=1,
        content=(
            "A stock is a share of ownership in a company. Owning one share "
            "gives you a small claim on the company's assets and earnings. "
            "Companies sell shares to raise money; investors buy them hoping "
            "the company grows and the share price rises."
        ),
        questions=(
            Question(
                id="q1",
                prompt="What does owning a share of stock represent?",
                options=(
                    "A loan to the company",
                    "Partial ownership of the company",
                    "A guaranteed dividend",
                    "A job at the company",
                ),
                correct_index=1,
                explanation="A share is a unit of ownership in the company.",
            ),
        ),
    ),
    Lesson(
        id="lesson-2",
        title="Reading Stock Prices",
        description="Understand how to read and interpret stock prices",
        level=LessonLevel.BEGINNER,
        order=2,
        content=(
            "A quote shows the last traded price, the change since the "
            "previous close in dollars and percent, and the volume of shares "
            "traded today. A negative change means the price fell."
        ),
        questions=(
            Question(
                id="q2-1",
                prompt="What does a change of -2.5% mean?",
                options=(
                    "The price rose 2.5% since the previous close",
                    "The price fell 2.5% since the previous close",
                    "2.5% of shares were sold",
                    "The company lost 2.5% of its employees",
                ),
                correct_index=1,
            ),
        ),
    ),
    Lesson(
        id="lesson-3",
        title="Stock Market Basics",
        description="Learn how the stock market operates",
        level=LessonLevel.BEGINNER,
        order=3,
        content=(
            "Stocks trade on exchanges such as the NYSE and NASDAQ. Buyers "
            "and sellers meet through brokers, and prices move with supply "
            "and demand. Your simulated account starts with $10,000 of "
            "virtual cash to practice with."
        ),
        questions=(
            Question(
                id="q3-1",
                prompt="Which of these is a stock exchange?",
                options=("NASDAQ", "IRS", "FDIC", "SEC"),
                correct_index=0,
            ),
        ),
    ),
    Lesson(
        id="lesson-4",
        title="Fundamental Analysis",
        description="Analyze companies using financial statements",
        level=LessonLevel.INTERMEDIATE,
        order=4,
        content=(
            "Fundamental analysis values a company from its financial "
            "statements: revenue, earnings, debt and cash flow. Ratios such "
            "as price-to-earnings compare the share price with what the "
            "company actually earns."
        ),
        questions=(
            Question(
                id="q4-1",
                prompt="What does the P/E ratio compare?",
                options=(
                    "Price and earnings per share",
                    "Profit and expenses",
                    "Price and equity",
                    "Payroll and employees",
                ),
                correct_index=0,
            ),
        ),
    ),
    Lesson(
        id="lesson-5",
        title="Technical Analysis",
        description="Understand price charts and trading patterns",
        level=LessonLevel.INTERMEDIATE,
        order=5,
        content=(
            "Technical analysis studies price and volume history. Moving "
            "averages smooth out noise, and support and resistance levels "
            "mark prices where buying or selling has repeatedly appeared."
        ),
        questions=(
            Question(
                id="q5-1",
                prompt="What does a moving average do?",
                options=(
                    "Predicts earnings",
                    "Smooths price data over a period",
                    "Sets the opening price",
                    "Measures company debt",
                ),
                correct_index=1,
            ),
        ),
    ),
    Lesson(
        id="lesson-6",
        title="Portfolio Management",
        description="Build and manage a diversified portfolio",
        level=LessonLevel.INTERMEDIATE,
        order=6,
        content=(
            "Diversifying across companies and sectors limits the damage any "
            "single stock can do. Your average cost per share is the total "
            "you paid divided by the shares you hold; selling does not "
            "change it."
        ),
        questions=(
            Question(
                id="q6-1",
                prompt="You buy 10 shares at $150 and 10 at $160. What is your average cost?",
                options=("$150", "$155", "$160", "$310"),
                correct_index=1,
            ),
        ),
    ),
    Lesson(
        id="lesson-7",
        title="Options Trading",
        description="Advanced derivatives trading strategies",
        level=LessonLevel.ADVANCED,
        order=7,
        content=(
            "An option gives the right, but not the obligation, to buy (call) "
            "or sell (put) a stock at a set strike price before expiry. "
            "Options add leverage and can expire worthless."
        ),
        questions=(
            Question(
                id="q7-1",
                prompt="A call option gives the holder the right to...",
                options=(
                    "Sell a stock at the strike price",
                    "Buy a stock at the strike price",
                    "Receive dividends",
                    "Vote at shareholder meetings",
                ),
                correct_index=1,
            ),
        ),
    ),
    Lesson(
        id="lesson-8",
        title="Risk Management",
        description="Master advanced risk management techniques",
        level=LessonLevel.ADVANCED,
        order=8,
        content=(
            "Position sizing caps how much of your capital sits in one idea. "
            "Stop-loss levels decide in advance when to exit a losing trade, "
            "before emotions take over."
        ),
        questions=(
            Question(
                id="q8-1",
                prompt="What is the purpose of a stop-loss?",
                options=(
                    "Guarantee a profit",
                    "Limit losses on a position",
                    "Avoid paying taxes",
                    "Buy more shares automatically",
                ),
                correct_index=1,
            ),
        ),
    ),
    Lesson(
        id="lesson-9",
        title="Market Psychology",
        description="Understand investor behavior and market dynamics",
        level=LessonLevel.ADVANCED,
        order=9,
        content=(
            "Fear and greed drive crowds to overreact. Herding, loss aversion "
            "and overconfidence push prices away from fundamentals, which "
            "disciplined investors can recognise and avoid."
        ),
        questions=(
            Question(
                id="q9-1",
                prompt="Loss aversion means investors tend to...",
                options=(
                    "Feel losses more strongly than equal gains",
                    "Avoid all risky assets",
                    "Sell winners too late",
                    "Ignore losses entirely",
                ),
                correct_index=0,
            ),
        ),
    ),
)
