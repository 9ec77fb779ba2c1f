class Interface:

    def __init__(self):
        self.core = None

    def onStart(self):
        pass

    def onEvent(self, action):
        """
        Invoked when an action is applied, either fresh or by redo.
        :param action: one of the action records in spider.History
        :return:
        """
        self.notifyRedraw()

    def onUndoEvent(self, action):
        """
        Invoked when an action is undone.
        :param action:
        :return:
        """
        self.notifyRedraw()

    def notifyRedraw(self):
        pass

    def onWin(self):
        pass
