from rich.pretty import pprint

from commandeer import *

registry = Registry()


@subcommand(permission="config.set")
def configset(caller, context, args):
    pprint({"caller": caller, "set": args})
    return True


@configset.completer
def configkeys(caller, context, args):
    return ["color", "depth"] if not args else []


registry.register("config set", configset)
registry.register("config get", lambda caller, context, args: pprint(args) or True)
registry.freeze()


if __name__ == '__main__':
    shell = Shell(registry, name="demo", colorful=True)
    pprint(registry.entries())
    pprint(shell.suggest("config "))
    shell.invoke()
