# event.py (improved)
#

# Based on pyevent originally found at http://www.emptypage.jp/notes/pyevent.en.html
#
# License: https://creativecommons.org/licenses/by/2.1/jp/deed.en
#
# Changes:
#   * Added type check in fire()
#   * Removed earg from fire() and added support for args/kwargs.
#   * A handler that raises is logged and the remaining handlers still run.

import logging

logger = logging.getLogger(__name__)


class Event(object):

    def __init__(self, doc=None):
        self.__doc__ = doc

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return EventHandler(self, obj)

    def __set__(self, obj, value):
        pass


class EventHandler(object):

    def __init__(self, event, obj):

        self.event = event
        self.obj = obj

    def __iter__(self):
        return iter(self._getfunctionlist())

    def __len__(self):
        return len(self._getfunctionlist())

    def _getfunctionlist(self):

        """(internal use) """

        try:
            eventhandler = self.obj.__eventhandler__
        except AttributeError:
            eventhandler = self.obj.__eventhandler__ = {}
        return eventhandler.setdefault(self.event, [])

    def add(self, func):

        """Add new event handler function.

        Event handler function must be defined like func(sender, **kwargs).
        You can add handler also by using '+=' operator.
        """

        self._getfunctionlist().append(func)
        return self

    def remove(self, func):

        """Remove existing event handler function.

        You can remove handler also by using '-=' operator.
        """

        self._getfunctionlist().remove(func)
        return self

    def clear(self):
        del self._getfunctionlist()[:]
        return self

    def fire(self, *args, **kwargs):

        """Fire event and call all handler functions

        You can call EventHandler object itself like e(*args, **kwargs) instead of
        e.fire(*args, **kwargs).  Exceptions raised by a handler are logged and
        do not prevent the remaining handlers from being called.
        """

        for func in list(self._getfunctionlist()):
            try:
                if type(func) == EventHandler:
                    func.fire(*args, **kwargs)
                else:
                    func(self.obj, *args, **kwargs)

            except Exception:
                logger.exception('Event handler %r failed', func)

    __iadd__ = add
    __isub__ = remove
    __call__ = fire
