# ================================================================================
# Injected Scripts
# ================================================================================
#
# JavaScript snippets evaluated in the browser by page objects.
#
# Both are passed to Playwright's `evaluate`; the drag-and-drop script is an
# arrow function receiving `[source, destination]` element handles.
#
# ================================================================================

SCROLL_TO_BOTTOM_SCRIPT = "window.scrollTo(0, document.body.scrollHeight)"

# Native mouse drag does not fire HTML5 drag/drop events in every browser,
# so the events are synthesized: dragstart on source, drop on destination
# with the same dataTransfer, then dragend on source.
DRAG_AND_DROP_SCRIPT = """
([source, destination]) => {
    function createEvent(typeOfEvent) {
        var event = document.createEvent("CustomEvent");
        event.initCustomEvent(typeOfEvent, true, true, null);
        event.dataTransfer = {
            data: {},
            setData: function (key, value) {
                this.data[key] = value;
            },
            getData: function (key) {
                return this.data[key];
            }
        };
        return event;
    }

    function dispatchEvent(element, event, transferData) {
        if (transferData !== undefined) {
            event.dataTransfer = transferData;
        }
        if (element.dispatchEvent) {
            element.dispatchEvent(event);
        } else if (element.fireEvent) {
            element.fireEvent("on" + event.type, event);
        }
    }

    var dragStartEvent = createEvent("dragstart");
    dispatchEvent(source, dragStartEvent);
    var dropEvent = createEvent("drop");
    dispatchEvent(destination, dropEvent, dragStartEvent.dataTransfer);
    var dragEndEvent = createEvent("dragend");
    dispatchEvent(source, dragEndEvent, dropEvent.dataTransfer);
}
"""
