"""Game building blocks: coroutines, logging, thread pool, plugins, entity history, texture pool and grid simulations."""

__version__ = "0.1.4"