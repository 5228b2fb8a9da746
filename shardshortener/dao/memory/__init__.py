from shardshortener.dao.memory.counters import AtomicCounter
from shardshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO


__all__ = ['AtomicCounter', 'ShortURLMemoryDAO']
