"""
The CONTROLLER layer connects the model to Qt: image loading, frame
rendering and the render loop timer.
"""
