class ScriptedRng:
    """
    Stand-in for random.Random that returns queued faces from randint, in order.
    """
    def __init__(self, faces):
        self.faces = list(faces)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.faces.pop(0)


def set_faces(game, faces):
    """Put the game's dice on the given faces, in die order."""
    for die, face in zip(game.dice, faces):
        die.face_value = face


def hold_all(game):
    for die in game.dice:
        die.hold()
