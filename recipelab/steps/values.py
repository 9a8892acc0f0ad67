"""Steps that fill, reduce and reset the model buffer."""

import math

from recipelab.schemas import CodeInfo, ConfigMap

from . import conf


def set_values(config: ConfigMap, model) -> bool:
    cnt = config.get_value(conf.SET_VALUES_CNT, 0)
    model.data[:] = [float(i) for i in range(cnt)]
    return True


def set_values_code(config: ConfigMap):
    cnt = config.get_value(conf.SET_VALUES_CNT, 0)
    if cnt > 0:
        return [
            f"cnt = {cnt}",
            "model.data[:] = [float(i) for i in range(cnt)]",
        ], CodeInfo(needs_scope=True)
    return ["model.data.clear()"], CodeInfo()


def calculate_sum(config: ConfigMap, model) -> bool:
    model.res = sum(model.data, 0.0)
    return True


def calculate_sum_code(config: ConfigMap):
    return ["model.res = sum(model.data, 0.0)"], CodeInfo()


def calculate_product(config: ConfigMap, model) -> bool:
    model.res = math.prod(model.data, start=1.0)
    return True


def calculate_product_code(config: ConfigMap):
    return ["model.res = math.prod(model.data, start=1.0)"], CodeInfo()


def clear_values(config: ConfigMap, model) -> bool:
    model.data.clear()
    model.res = 0.0
    return True


def clear_values_code(config: ConfigMap):
    return ["model.data.clear()", "model.res = 0.0"], CodeInfo()
