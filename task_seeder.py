import os


class BuildConfigurationError(Exception):
    """Raised when a seeding hook cannot create its directory or file."""


class TaskDescriptor:
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"TaskDescriptor({self.name!r})"


class Task:
    def __init__(self, name, action=None):
        self.descriptor = TaskDescriptor(name)
        self.action = action
        self.hooks = []
        self.hook_results = []

    @property
    def name(self):
        return self.descriptor.name

    def do_first(self, hook):
        # Hooks run in the order they were added, all before the action
        self.hooks.append(hook)

    def run(self):
        self.hook_results = [hook(self) for hook in self.hooks]
        if self.action is not None:
            return self.action(self)
        return None


class TaskRegistry:
    """Stand-in for the host build system's task container.

    Observers only see tasks registered after they subscribed.
    """

    def __init__(self):
        self._tasks = {}
        self._observers = []

    def when_task_added(self, callback):
        self._observers.append(callback)

    def register(self, name, action=None):
        if name in self._tasks:
            raise ValueError(f"Task already registered: {name}")
        task = Task(name, action)
        self._tasks[name] = task
        for callback in list(self._observers):
            callback(task)
        return task

    def get(self, name):
        return self._tasks[name]

    def names(self):
        return list(self._tasks)

    def execute(self, name):
        return self.get(name).run()


def seed_artifact(path, payload):
    """Write payload to path unless something is already there.

    Returns True when the placeholder was written, False when the path was
    already occupied. Failing to create the directory or the file raises
    BuildConfigurationError.
    """
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    except OSError as e:
        raise BuildConfigurationError(f"Cannot create directory for {path}: {e}") from e

    if os.path.exists(path):
        return False
    try:
        # Exclusive create: a concurrent writer that got there first wins
        with open(path, 'xb') as outfile:
            outfile.write(payload)
    except FileExistsError:
        return False
    except OSError as e:
        raise BuildConfigurationError(f"Cannot seed {path}: {e}") from e
    return True


def register_seeder(registry, predicate, path_rule, payload):
    payload = bytes(payload)

    def hook(task):
        return seed_artifact(path_rule(task.name), payload)

    def on_task_added(task):
        if predicate(task.name):
            task.do_first(hook)

    registry.when_task_added(on_task_added)
