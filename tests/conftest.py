import pytest


SCOTIA_TEXT = """\
Scotia Momentum VISA Infinite card
Statement date   Jan 5, 2024
Account summary
Previous balance                      $500.00
Payments/credits                     -$520.00
Purchases/charges                    +$101.45
Interest charges                       +$0.00
New balance                            $81.45

Annual interest rates
Purchases                  19.99%

REF.#  TRANS.  POST
       DATE    DATE    DETAILS                                    AMOUNT($)
001    Dec 10  Dec 11  AMAZON.CA AMAZON.CA ON                       45.99
002    Dec 15  Dec 16  PAYMENT FROM - *****12*3456                 500.00-
003    Dec 20  Dec 21  UBER TRIP  AMT 12.00 USD                     16.45
004    Dec 31  Jan 02  COFFEE SHOP TORONTO ON                       39.01
005    Jan 02  Jan 03  RETURN - BEST BUY                            20.00-
"""

CIBC_TEXT = """\
CIBC Dividend Visa Card
Statement period Dec 16, 2023 to Jan 15, 2024
Your payments
Trans   Post
date    date    Description                               Amount($)
Jan 02  Jan 03  PAYMENT THANK YOU/PAIEMENT MERCI             500.00
Total payments                                             $500.00

Your new charges and credits
Trans   Post
date    date    Description                               Amount($)
Dec 18  Dec 19  AMAZON.CA AMAZON.CA ON                        45.99
Dec 20  Dec 21  LONG MERCHANT NAME THAT
                WRAPS ONTO NEXT LINE TORONTO ON               20.00
Jan 05  Jan 06  HOTEL BOOKING                                110.00
                CONFIRMATION 12345
Jan 08  Jan 09  REFUND STORE                                 -10.00
Total for 4500 XXXX XXXX 1234                               $165.99

Total credits    -$510.00
Total charges    +$175.99
"""

PC_TEXT = """\
PC Financial World Elite Mastercard
Statement date: February 15, 2024
Previous balance                 $1,000.00
Payments                       - $1,000.00
Purchases                        +  $845.50
Interest                         +    $4.50
New balance                        $850.00

TRANSACTION  POSTING
DATE         DATE      DESCRIPTION                        AMOUNT ($)
Jan 18       Jan 19    LOBLAWS #1234 TORONTO ON                55.12
Jan 20       Jan 22    PAYMENT - THANK YOU                 -1,000.00
Feb 02       Feb 03    SHOPPERS DRUG MART                     800.38
Feb 10       Feb 11    REFUND SHOPPERS                        -10.00
Feb 15       Feb 15    PURCHASE INTEREST                        4.50
"""


@pytest.fixture
def scotia_text():
    return SCOTIA_TEXT


@pytest.fixture
def cibc_text():
    return CIBC_TEXT


@pytest.fixture
def pc_text():
    return PC_TEXT
