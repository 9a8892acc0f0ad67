"""Config keys read by the example steps."""

PRINT_NUMBER_NUM = "num"
SET_VALUES_CNT = "cnt"
CHECK_REF = "ref"
