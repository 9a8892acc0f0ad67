"""
Abort-capable steps.

Both compare exactly: the example inputs are exactly representable, and any
tolerance would be the business of the individual step.
"""

from recipelab.schemas import CodeInfo, ConfigMap, StepInfo

from . import conf


def check_value(config: ConfigMap, model) -> bool:
    ref = config.get_value(conf.CHECK_REF, 0.0)
    return ref == model.res


def check_value_info() -> StepInfo:
    return StepInfo(always_same_code=False, returns_stop=True, stop_variable="res_ok")


def check_value_code(config: ConfigMap):
    ref = config.get_value(conf.CHECK_REF, 0.0)
    return [
        f"expected_value = {ref!r}",
        "res_ok = expected_value == model.res",
    ], CodeInfo(needs_scope=True)


def check_data(config: ConfigMap, model) -> bool:
    return len(model.data) > 0


def check_data_info() -> StepInfo:
    return StepInfo(always_same_code=True, returns_stop=True, stop_variable="populated")


def check_data_code(config: ConfigMap):
    return ["populated = len(model.data) > 0"], CodeInfo(needs_scope=True)
