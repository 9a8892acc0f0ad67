"""Steps that print to stdout."""

from recipelab.schemas import CodeInfo, ConfigMap

from . import conf


def hello_world(config: ConfigMap, model) -> bool:
    print("Hello World!")
    return True


def hello_world_code(config: ConfigMap):
    return ['print("Hello World!")'], CodeInfo()


def print_number(config: ConfigMap, model) -> bool:
    value = config.get_value(conf.PRINT_NUMBER_NUM, 0.0)
    print("Number:", value)
    return True


def print_number_code(config: ConfigMap):
    value = config.get_value(conf.PRINT_NUMBER_NUM, 0.0)
    return [f'print("Number:", {value!r})'], CodeInfo()


def print_value(config: ConfigMap, model) -> bool:
    print("Result:", model.res)
    return True


def print_value_code(config: ConfigMap):
    return ['print("Result:", model.res)'], CodeInfo()


def print_data(config: ConfigMap, model) -> bool:
    print("Data:")
    for v in model.data:
        print(v)
    return True


def print_data_code(config: ConfigMap):
    return [
        'print("Data:")',
        "for v in model.data:",
        "    print(v)",
    ], CodeInfo()
