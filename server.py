import json
from argparse import ArgumentParser
from flask import Flask, request, make_response, Response
from avltree import AVLTree

app = Flask(__name__)

trees = {
    "tree": AVLTree()
}


def flag(name, default):
    return request.args.get(name, default) not in ("0", "false", "no", "")


@app.route("/insert/<int(signed=True):value>", methods=["POST"])
def insert(value):
    tree = trees["tree"]
    tree.insert(value)
    print("Inserted {}, tree holds {} values".format(value, len(tree)))
    return make_response(str(len(tree)), 202)


@app.route("/remove/<int(signed=True):value>", methods=["POST"])
def remove(value):
    tree = trees["tree"]
    tree.remove(value)
    print("Removed {}, tree holds {} values".format(value, len(tree)))
    return make_response(str(len(tree)), 202)


@app.route("/contains/<int(signed=True):value>", methods=["GET"])
def contains(value):
    return make_response("true" if value in trees["tree"] else "false", 200)


@app.route("/get/<int(signed=True):value>", methods=["GET"])
def get(value):
    found = trees["tree"].get(value)
    if found is None:
        return make_response("{} not found".format(value), 404)
    return make_response(str(found), 200)


@app.route("/inorder", methods=["GET"])
def inorder():
    values = []
    trees["tree"].inorder(values.append)
    return Response(json.dumps(values), mimetype="application/json")


@app.route("/print", methods=["GET"])
def print_tree():
    hspace = request.args.get("hspace", 3, type=int)
    if hspace < 0:
        return make_response("hspace must not be negative", 400)
    lines = []
    printer = trees["tree"].printer(out=lines.append)
    printer.square_branches = flag("square", "1")
    printer.lr_agnostic = flag("lr_agnostic", "0")
    printer.hspace = hspace
    printer.print_tree(trees["tree"].root)
    return Response("".join(line + "\n" for line in lines), mimetype="text/plain")


@app.route("/clear", methods=["POST"])
def clear():
    trees["tree"] = AVLTree()
    print("Tree cleared")
    return make_response("0", 202)


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--port", type=int, default=5000)
    args = parser.parse_args()
    app.run(port=args.port, threaded=False)
