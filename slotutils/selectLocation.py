from colorama import Fore
from inputimeout import TimeoutOccurred, inputimeout

from slotutils.config import ClientConfig
from slotutils.displayData import displayTable
from slotutils.errors import PromptCancelled


def readChoice(prompt, config):
    if config.prompt_timeout:
        return inputimeout(prompt=prompt, timeout=config.prompt_timeout)
    return input(prompt)


def matchOption(choice, options):
    """
    Resolves what the user typed to one of options: a 1-based index, a
    name in any case, or the start of exactly one name. Returns None when
    nothing or more than one option matches.
    """
    choice = choice.strip()
    if not choice:
        return None

    if choice.isdecimal():
        idx = int(choice)
        if 1 <= idx <= len(options):
            return options[idx - 1]
        return None

    lowered = choice.lower()
    for option in options:
        if option.lower() == lowered:
            return option

    matches = [option for option in options if option.lower().startswith(lowered)]
    if len(matches) == 1:
        return matches[0]
    return None


def selectOption(label, options, config=None):
    """
    This function
        1. Lists the options (sorted by name) with an index,
        2. Prompts until the user picks one by index or by name, and
        3. Returns the chosen option
    """
    config = config or ClientConfig()
    options = sorted(options)
    if not options:
        raise PromptCancelled(f"{label}: nothing to choose from")

    print(f"{Fore.CYAN}", end="")
    print(f"\n{label}")
    print(f"{Fore.RESET}", end="")
    displayTable([{"name": option} for option in options])

    while True:
        try:
            choice = readChoice(f"\n{label} (index or name): ", config)
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptCancelled(f"{label}: selection aborted") from e
        except TimeoutOccurred as e:
            raise PromptCancelled(f"{label}: no selection within {config.prompt_timeout} seconds") from e

        selected = matchOption(choice, options)
        if selected is not None:
            print(f"{Fore.GREEN}", end="")
            print(f"============> Selected: {selected}")
            print(f"{Fore.RESET}", end="")
            return selected

        print(f"{Fore.RED}", end="")
        print("============> Invalid Option Entered!")
        print(f"{Fore.RESET}", end="")
